r"""Rewrite fragment headings into global section numbers.

Each fragment's ATX headings are renumbered as ``<ordinal>.<counters...>`` so
chapters authored in isolation read as one hierarchical document. While
scanning, every heading also contributes a line to the shared
:class:`TocBuffer`, which the assembler later injects into the TOC host.
Fenced code blocks (lines starting with three backticks) are copied through
untouched.

Example
-------
>>> from rfc_assembler.renumber import HeadingRenumberer, TocBuffer
>>> from rfc_assembler.sequencer import FragmentDescriptor
>>> fragment = FragmentDescriptor("Intro", "t/r/intro.md", "r/intro.md", "intro.md", 2)
>>> toc = TocBuffer()
>>> HeadingRenumberer(toc, terminate_headings=True).renumber(fragment, "# Intro\n")
'# 2.1 Intro\n'
>>> toc.lines[-1]
'* `..` 2.1 Intro'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ._constants import MAX_HEADING_LEVEL
from .errors import StructuralError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .sequencer import FragmentDescriptor

FENCE_PATTERN = re.compile(r"^```")
HEADING_PATTERN = re.compile(rf"^(#{{1,{MAX_HEADING_LEVEL}}})\s+(.*)")


class TocBuffer:
    """Ordered, append-only table-of-contents lines for one generation run."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, line: str) -> None:
        """Add ``line`` after every entry recorded so far."""
        self._lines.append(line)

    def reset(self) -> None:
        """Discard all entries at the start of a run."""
        self._lines.clear()

    @property
    def lines(self) -> tuple[str, ...]:
        """Return a snapshot of the recorded entries."""
        return tuple(self._lines)

    def render(self) -> str:
        """Join the entries with newlines for injection into the TOC host."""
        return "\n".join(self._lines)

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


@dc.dataclass(slots=True)
class _HeadingState:
    """Scratch state for scanning a single fragment."""

    counters: dict[int, int] = dc.field(
        default_factory=lambda: dict.fromkeys(range(1, MAX_HEADING_LEVEL + 1), 0)
    )
    last_level: int = 1
    in_code: bool = False

    def advance(self, level: int) -> None:
        """Apply the level-transition rule for a heading at ``level``."""
        if level == self.last_level:
            self.counters[level] += 1
        elif level > self.last_level:
            self.counters[level] = 1
        else:
            # Ascending always bumps the top level, whatever the landing depth.
            self.counters[1] += 1
            for depth in range(2, level + 1):
                self.counters[depth] = 1
        self.last_level = level

    def section_number(self, index: int, level: int) -> str:
        """Return ``index`` followed by the counters for levels 1..``level``."""
        parts = [index, *(self.counters[depth] for depth in range(1, level + 1))]
        return ".".join(str(part) for part in parts)


def toc_leader(section_number: str) -> str:
    """Return the ``..`` indent leader for a dotted section number."""
    return ".." * section_number.count(".")


def fragment_toc_line(fragment: FragmentDescriptor) -> str:
    """Return the top-level TOC line that introduces ``fragment``."""
    return f"\n# [Section: {fragment.index}: {fragment.name}]({fragment.target})\n"


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping empty trailing fields."""
    lines = text.split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


class HeadingRenumberer:
    """Renumber fragment headings and record their TOC entries."""

    def __init__(
        self,
        toc: TocBuffer,
        *,
        verbatim: cabc.Iterable[str] = (),
        terminate_headings: bool = False,
    ) -> None:
        """Bind the renumberer to the run's TOC accumulator.

        Parameters
        ----------
        toc : TocBuffer
            Buffer shared by every fragment of the current run.
        verbatim : Iterable[str], optional
            Fragment names whose text passes through without renumbering.
        terminate_headings : bool, optional
            Emit a newline after each rewritten heading. When ``False`` the
            heading runs into the following line, matching existing output.
        """
        self.toc = toc
        self.verbatim = frozenset(verbatim)
        self.terminate_headings = terminate_headings

    def renumber(self, fragment: FragmentDescriptor, text: str) -> str:
        """Return ``text`` with headings rewritten for ``fragment``.

        Parameters
        ----------
        fragment : FragmentDescriptor
            Fragment being processed; supplies the ordinal and TOC link.
        text : str
            Raw markdown source of the fragment.

        Returns
        -------
        str
            Markdown with each heading replaced by ``<hashes> <number> <title>``.

        Raises
        ------
        StructuralError
            If the first heading is not level 1 or a heading skips a level.
        """
        self.toc.append(fragment_toc_line(fragment))
        if fragment.name in self.verbatim:
            return text

        state = _HeadingState()
        rewritten: list[str] = []
        for line in split_lines(text):
            if FENCE_PATTERN.match(line):
                state.in_code = not state.in_code
                rewritten.append(f"{line}\n")
                continue
            match = None if state.in_code else HEADING_PATTERN.match(line)
            if match is None:
                rewritten.append(f"{line}\n")
                continue
            hashes, title = match.groups()
            number = self._number_heading(fragment, state, len(hashes), title)
            self.toc.append(f"* `{toc_leader(number)}` {number} {title}")
            heading = f"{hashes} {number} {title}"
            rewritten.append(f"{heading}\n" if self.terminate_headings else heading)
        return "".join(rewritten)

    @staticmethod
    def _number_heading(
        fragment: FragmentDescriptor, state: _HeadingState, level: int, title: str
    ) -> str:
        """Advance the counters for a heading and return its section number."""
        previous = state.last_level
        state.advance(level)
        if state.counters[1] == 0:
            msg = f"{fragment.source} didn't start with a level 1 heading"
            raise StructuralError(msg)
        if level > previous + 1:
            msg = (
                f"{fragment.source} jumps from a level {previous} heading to "
                f"level {level} at '{title}'"
            )
            raise StructuralError(msg)
        return state.section_number(fragment.index, level)


__all__ = [
    "FENCE_PATTERN",
    "HEADING_PATTERN",
    "HeadingRenumberer",
    "TocBuffer",
    "fragment_toc_line",
    "split_lines",
    "toc_leader",
]
