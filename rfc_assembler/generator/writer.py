"""Persist rendered artifacts beneath the project root."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import Artifact


class OutputWriter:
    """Write artifacts as UTF-8, overwriting existing files."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write(self, artifact: Artifact) -> Path:
        """Write ``artifact`` and return its absolute output path."""
        output_path = self.root / artifact.path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(artifact.text, encoding="utf-8")
        return output_path


__all__ = ["OutputWriter"]
