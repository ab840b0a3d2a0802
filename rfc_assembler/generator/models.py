"""Shared dataclasses used by the assembly pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class Artifact:
    """A rendered document waiting to be written.

    Attributes
    ----------
    path : str
        Output path relative to the project root.
    text : str
        Fully rendered file contents.
    """

    path: str
    text: str


__all__ = ["Artifact"]
