"""Unit tests for strict template rendering."""

from __future__ import annotations

import pytest

from rfc_assembler.errors import RenderError
from rfc_assembler.generator import TemplateRenderer
from rfc_assembler.generator.renderer import literal_statements
from rfc_assembler.sequencer import NavigationLink


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_interpolates_nested_values(renderer: TemplateRenderer) -> None:
    link = NavigationLink(name="Overview", basename="overview.md")
    result = renderer.render(
        "Next: [[% next.name %]]([% next.basename %])\n",
        {"next": link},
        name="nav",
    )
    assert result == "Next: [Overview](overview.md)\n"


def test_default_jinja_delimiters_are_literal(renderer: TemplateRenderer) -> None:
    source = "{{TOC}} and {% raw %} stay [% who %]\n"
    assert renderer.render(source, {"who": "put"}, name="toc") == (
        "{{TOC}} and {% raw %} stay put\n"
    )


def test_undefined_top_level_name_fails(renderer: TemplateRenderer) -> None:
    with pytest.raises(RenderError, match="undefined variables: missing"):
        renderer.render("[% missing %]", {}, name="t")


def test_undefined_attribute_fails(renderer: TemplateRenderer) -> None:
    link = NavigationLink(name="Overview", basename="overview.md")
    with pytest.raises(RenderError, match="t:"):
        renderer.render("[% prev.title %]", {"prev": link}, name="t")


def test_unused_binding_fails(renderer: TemplateRenderer) -> None:
    with pytest.raises(RenderError, match="unused variables: extra"):
        renderer.render("[% used %]", {"used": "x", "extra": "y"}, name="t")


def test_loop_variables_count_as_use(renderer: TemplateRenderer) -> None:
    source = "<% for item in items %>\n- [% item %]\n<% endfor %>\n"
    assert renderer.render(source, {"items": ["a", "b"]}, name="list") == "- a\n- b\n"


def test_syntax_error_is_reported_as_render_error(renderer: TemplateRenderer) -> None:
    with pytest.raises(RenderError, match="broken"):
        renderer.render("[% unclosed ", {"unclosed": 1}, name="broken")


def test_literal_statements_keep_only_interpolation_live(
    renderer: TemplateRenderer,
) -> None:
    body = "<# note #>\n<%= name %> <% end %>\nBy [% who %]\n"
    result = renderer.render(literal_statements(body), {"who": "ops"}, name="body")
    assert result == "<# note #>\n<%= name %> <% end %>\nBy ops\n"
