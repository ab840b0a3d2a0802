"""Cyclopts CLI entrypoint for assembling RFC documents.

The ``rfcs`` console script defined here reads an ``rfcs.yaml`` configuration,
renumbers every fragment's headings, renders the navigation scaffold and the
README entry document, and injects the generated table of contents. Typical
usage involves running ``rfcs generate`` locally or in CI after editing a
fragment.

Examples
--------
Generate the document set for the default configuration:

>>> from rfc_assembler.cli import main
>>> main()  # doctest: +SKIP

Generate with progress logging from another config:

>>> from rfc_assembler.cli import app
>>> app(["generate", "--config", "docs/rfcs.yaml", "--verbose"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_assembly_config
from .generator import RFCAssembler

DEFAULT_CONFIG = Path("rfcs.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="rfcs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Renumber RFC fragments and publish them with a README and TOC.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the RFC config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    root: typ.Annotated[
        Path | None,
        Parameter(
            help="Project root for relative paths (defaults to the config's folder)",
            env_var="INPUT_ROOT",
        ),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log each processed file", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Generate the numbered RFC documents described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``rfcs.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    root : Path or None, optional
        Directory that template, fragment, and output paths resolve against;
        when ``None`` (default) the directory containing ``config`` is used.
    verbose : bool, optional
        Emit ``Processing <file>`` log lines while rendering.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    RFCAssemblyError
        Any configuration, structural, or rendering failure; the run stops
        before writing when one is detected.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    assembly = load_assembly_config(config, root=root)
    written = RFCAssembler(assembly).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``rfcs`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
