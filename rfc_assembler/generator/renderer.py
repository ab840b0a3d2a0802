"""Strict, logic-less template rendering for markdown artifacts."""

from __future__ import annotations

import re
import typing as typ

from jinja2 import (
    Environment,
    StrictUndefined,
    TemplateSyntaxError,
    UndefinedError,
    meta,
)

from rfc_assembler.errors import RenderError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

VARIABLE_START = "[%"
VARIABLE_END = "%]"
BLOCK_START = "<%"
COMMENT_START = "<#"

_STATEMENT_OPENER = re.compile(f"{re.escape(BLOCK_START)}|{re.escape(COMMENT_START)}")


def literal_statements(text: str) -> str:
    """Return ``text`` with block and comment openers rendered as plain text.

    Only ``[% %]`` interpolation stays live, so fragment bodies such as ERB or
    PowerShell samples inside code fences survive rendering unchanged.

    Examples
    --------
    >>> literal_statements("<%= name %> [% who %]")
    '[% "<%" %]= name %> [% who %]'
    """
    return _STATEMENT_OPENER.sub(lambda match: f'[% "{match.group()}" %]', text)


class TemplateRenderer:
    """Interpolate ``[% path.to.value %]`` references with strict bindings.

    Jinja's default ``{{ }}``/``{% %}`` delimiters are replaced so markdown
    bodies (and markers such as ``{{TOC}}``) pass through as literal text.
    Block tags use ``<% %>`` and comments ``<# #>``; pass untrusted markdown
    through :func:`literal_statements` to keep only interpolation live.
    """

    def __init__(self) -> None:
        self.env = Environment(
            variable_start_string=VARIABLE_START,
            variable_end_string=VARIABLE_END,
            block_start_string=BLOCK_START,
            block_end_string="%>",
            comment_start_string=COMMENT_START,
            comment_end_string="#>",
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self, source: str, context: cabc.Mapping[str, typ.Any], *, name: str
    ) -> str:
        """Render ``source`` against ``context``.

        Parameters
        ----------
        source : str
            Template text.
        context : Mapping[str, Any]
            Top-level names available to the template.
        name : str
            Label used in error messages (usually the template path).

        Returns
        -------
        str
            Rendered text.

        Raises
        ------
        RenderError
            If the template is malformed, references a name or attribute that
            the context lacks, or the context supplies a name the template
            never references.
        """
        try:
            parsed = self.env.parse(source, name=name)
        except TemplateSyntaxError as exc:
            msg = f"{name}: {exc.message} (line {exc.lineno})"
            raise RenderError(msg) from exc

        referenced = meta.find_undeclared_variables(parsed)
        undefined = sorted(referenced - set(context) - set(self.env.globals))
        if undefined:
            msg = f"{name}: undefined variables: {', '.join(undefined)}"
            raise RenderError(msg)
        unused = sorted(set(context) - referenced)
        if unused:
            msg = f"{name}: unused variables: {', '.join(unused)}"
            raise RenderError(msg)

        try:
            return self.env.from_string(parsed).render(**context)
        except UndefinedError as exc:
            msg = f"{name}: {exc.message}"
            raise RenderError(msg) from exc


__all__ = ["TemplateRenderer", "literal_statements"]
