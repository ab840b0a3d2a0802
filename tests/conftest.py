"""Shared fixtures that build a small RFC project tree on disk."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

README_TEMPLATE = (
    "# Project RFCs\n"
    "\n"
    "<% for rfc in templates %>\n"
    "* [[% rfc.name %]]([% rfc.target %])\n"
    "<% endfor %>\n"
    "\n"
    "Source: [% config.github %]\n"
)

FRAGMENTS = {
    "toc.md": "# Contents\n\n{{TOC}}\n",
    "overview.md": "# Overview\n\nIntro text.\n\n## Goals\n\nBe clear.\n",
    "design.md": (
        "# Design\n"
        "\n"
        "```\n"
        "# not a heading\n"
        "```\n"
        "\n"
        "## Storage\n"
        "\n"
        "## Network\n"
        "\n"
        "# Appendix\n"
    ),
}


def write_config(root: Path, *, extra_main: str = "", rfcs: str | None = None) -> Path:
    """Write an ``rfcs.yaml`` into ``root`` and return its path."""
    entries = rfcs or (
        "  - title: Overview\n"
        "    filename: overview.md\n"
        "  - title: Design\n"
        "    filename: design.md\n"
    )
    config_path = root / "rfcs.yaml"
    config_path.write_text(
        dedent(
            """
            main:
              template_dir: templates
              rfc_dir: rfcs
              readme: README.md
              toc: toc.md
              toc_marker: "{{TOC}}"
              github: https://github.com/example/rfcs
            """
        ).strip()
        + "\n"
        + extra_main
        + "rfcs:\n"
        + entries,
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def rfc_project(tmp_path: Path) -> cabc.Callable[..., Path]:
    """Return a factory that lays out templates, fragments, and config.

    The factory accepts ``fragments`` overrides (file name to markdown) plus the
    keyword arguments of :func:`write_config`, and returns the config path.
    """

    def _build(
        *, fragments: cabc.Mapping[str, str] | None = None, **config_kwargs: typ.Any
    ) -> Path:
        rfc_sources = tmp_path / "templates" / "rfcs"
        rfc_sources.mkdir(parents=True, exist_ok=True)
        (tmp_path / "templates" / "README.md").write_text(
            README_TEMPLATE, encoding="utf-8"
        )
        for name, text in {**FRAGMENTS, **(fragments or {})}.items():
            (rfc_sources / name).write_text(text, encoding="utf-8")
        return write_config(tmp_path, **config_kwargs)

    return _build
