"""Assemble independently authored markdown RFCs into one numbered document.

This package exposes the CLI entry points used by the ``rfcs`` console script
to sequence fragments, renumber their headings, render navigation and the
README, and inject the generated table of contents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from rfc_assembler import main
>>> main()  # doctest: +SKIP
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
