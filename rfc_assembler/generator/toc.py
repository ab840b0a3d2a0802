"""Inject the accumulated table of contents into its host file."""

from __future__ import annotations

import logging
import typing as typ

from rfc_assembler.errors import StructuralError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


class TocInjector:
    """Replace a literal marker token with generated TOC lines."""

    def __init__(self, marker: str) -> None:
        self.marker = marker

    def ensure_marker(self, text: str, location: str | Path) -> None:
        """Raise :class:`StructuralError` unless ``text`` contains the marker."""
        if self.marker not in text:
            msg = f"TOC marker '{self.marker}' not found in toc file: {location}"
            raise StructuralError(msg)

    def inject(
        self, text: str, lines: cabc.Iterable[str], location: str | Path
    ) -> str:
        """Return ``text`` with the first marker replaced by ``lines``.

        Examples
        --------
        >>> injector = TocInjector("{{TOC}}")
        >>> injector.inject("A\\n{{TOC}}\\nB", ["* one", "* two"], "toc.md")
        'A\\n* one\\n* two\\nB'
        """
        self.ensure_marker(text, location)
        return text.replace(self.marker, "\n".join(lines), 1)

    def rewrite(self, path: Path, lines: cabc.Iterable[str]) -> Path:
        """Inject ``lines`` into the host file at ``path`` in place."""
        contents = path.read_text(encoding="utf-8")
        path.write_text(self.inject(contents, lines, path), encoding="utf-8")
        logger.info("Injected table of contents into %s", path)
        return path


__all__ = ["TocInjector"]
