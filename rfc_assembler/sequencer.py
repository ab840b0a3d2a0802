"""Assign ordinal positions and navigation links to RFC fragments.

The sequencer turns the ordered ``rfcs`` entries from the configuration into
immutable :class:`FragmentDescriptor` objects. A synthetic "Table of Contents"
fragment, backed by the configured TOC host file, always occupies ordinal 0;
real fragments follow from ordinal 1 in configuration order. Each source file
is validated eagerly so a run never starts with a missing chapter.

Example
-------
>>> from pathlib import Path
>>> from rfc_assembler.config import load_assembly_config
>>> from rfc_assembler.sequencer import navigation, sequence_fragments
>>> config = load_assembly_config(Path("rfcs.yaml"))  # doctest: +SKIP
>>> fragments = sequence_fragments(
...     config.main, config.rfcs, config.root
... )  # doctest: +SKIP
>>> [fragment.index for fragment in fragments]  # doctest: +SKIP
[0, 1, 2]
>>> prev, next_ = navigation(fragments)[0]  # doctest: +SKIP
>>> prev.name  # doctest: +SKIP
'README'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ

from ._constants import MARKDOWN_SUFFIX, TOC_FRAGMENT_NAME
from .config import FragmentEntry
from .errors import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import MainConfig


@dc.dataclass(frozen=True, slots=True)
class FragmentDescriptor:
    """A fragment placed in final document order.

    Attributes
    ----------
    name : str
        Chapter title shown in navigation and the TOC.
    source : str
        POSIX path of the markdown source, relative to the project root.
    target : str
        POSIX path of the rendered output, relative to the project root.
    basename : str
        File name shared by source and target.
    index : int
        Ordinal position; 0 is the table of contents host.
    """

    name: str
    source: str
    target: str
    basename: str
    index: int

    @property
    def link(self) -> NavigationLink:
        """Return the navigation link pointing at this fragment."""
        return NavigationLink(name=self.name, basename=self.basename)


@dc.dataclass(frozen=True, slots=True)
class NavigationLink:
    """Name and file a prev/next navigation entry points at."""

    name: str
    basename: str


README_LINK = NavigationLink(name="README", basename="/README.md")


def sequence_fragments(
    main: MainConfig, entries: cabc.Sequence[FragmentEntry], root: Path
) -> list[FragmentDescriptor]:
    """Return descriptors for the TOC host followed by ``entries`` in order.

    Parameters
    ----------
    main : MainConfig
        Directory settings and the TOC host file name.
    entries : Sequence[FragmentEntry]
        Ordered fragment titles and file names from the configuration.
    root : Path
        Project root used to check that every source exists.

    Returns
    -------
    list[FragmentDescriptor]
        Descriptors with dense ordinals starting at 0 for the TOC host.

    Raises
    ------
    ConfigurationError
        If a file name does not end in ``.md`` or its source is missing.
    """
    toc_entry = FragmentEntry(title=TOC_FRAGMENT_NAME, filename=main.toc)
    fragments: list[FragmentDescriptor] = []
    for index, entry in enumerate([toc_entry, *entries]):
        source = _assert_template_name(
            entry.filename, root, main.template_dir, main.rfc_dir
        )
        fragments.append(
            FragmentDescriptor(
                name=entry.title,
                source=source,
                target=posixpath.join(main.rfc_dir, entry.filename),
                basename=entry.filename,
                index=index,
            )
        )
    return fragments


def navigation(
    fragments: cabc.Sequence[FragmentDescriptor],
) -> list[tuple[NavigationLink, NavigationLink]]:
    """Return ``(prev, next)`` links for every fragment.

    The first fragment's ``prev`` and the last fragment's ``next`` point back
    at the README entry document.
    """
    links: list[tuple[NavigationLink, NavigationLink]] = []
    for position in range(len(fragments)):
        prev = fragments[position - 1].link if position > 0 else README_LINK
        following = (
            fragments[position + 1].link
            if position + 1 < len(fragments)
            else README_LINK
        )
        links.append((prev, following))
    return links


def readme_template(main: MainConfig, root: Path) -> str:
    """Validate and return the README template path relative to ``root``."""
    return _assert_template_name(main.readme, root, main.template_dir)


def _assert_template_name(filename: str, root: Path, *dirs: str) -> str:
    """Check the markdown suffix and existence of ``dirs/filename``."""
    if not filename.endswith(MARKDOWN_SUFFIX):
        msg = f"Template filename must end in '{MARKDOWN_SUFFIX}': {filename}"
        raise ConfigurationError(msg)
    location = posixpath.join(*dirs, filename)
    if not (root / location).exists():
        msg = f"Template '{location}' does not exist"
        raise ConfigurationError(msg)
    return location


__all__ = [
    "README_LINK",
    "FragmentDescriptor",
    "NavigationLink",
    "navigation",
    "readme_template",
    "sequence_fragments",
]
