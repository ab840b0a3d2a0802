"""Typed dataclasses describing the RFC assembly configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(slots=True)
class MainConfig:
    """Settings from the ``main`` block shared by every fragment.

    Attributes
    ----------
    template_dir : str
        Directory holding the README template and the fragment sources.
    rfc_dir : str
        Sub-directory of ``template_dir`` with fragment sources; also the
        output directory for rendered fragments.
    readme : str
        README template name inside ``template_dir`` and its output path.
    toc : str
        File name of the fragment that hosts the table of contents.
    toc_marker : str
        Literal token in the TOC host replaced by the generated entries.
    github : str
        Repository URL used by the attribution links in each fragment.
    verbatim : tuple[str, ...]
        Fragment names copied through without heading renumbering.
    terminate_headings : bool
        Append a newline after each rewritten heading.
    """

    template_dir: str
    rfc_dir: str
    readme: str
    toc: str
    toc_marker: str
    github: str = ""
    verbatim: tuple[str, ...] = ()
    terminate_headings: bool = False


@dc.dataclass(slots=True)
class FragmentEntry:
    """One ``rfcs`` entry: a chapter title and its markdown file name."""

    title: str
    filename: str


@dc.dataclass(slots=True)
class AssemblyConfig:
    """Fully validated configuration for one generation run."""

    main: MainConfig
    rfcs: list[FragmentEntry]
    root: Path


__all__ = ["AssemblyConfig", "FragmentEntry", "MainConfig"]
