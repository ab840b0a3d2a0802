"""Load the RFC assembly YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from rfc_assembler.errors import ConfigurationError

from .models import AssemblyConfig, FragmentEntry, MainConfig

REQUIRED_MAIN_KEYS = ("template_dir", "rfc_dir", "readme", "toc", "toc_marker")
OPTIONAL_MAIN_KEYS = ("github", "verbatim", "terminate_headings")


def load_assembly_config(path: Path, *, root: Path | None = None) -> AssemblyConfig:
    """Load and validate the YAML configuration describing an RFC set.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``rfcs.yaml``).
    root : Path, optional
        Project root that relative paths resolve against. Defaults to the
        directory containing ``path``.

    Returns
    -------
    AssemblyConfig
        Parsed ``main`` settings, the ordered fragment entries, and the root.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigurationError
        If the document is not a mapping, required ``main`` fields are missing
        or malformed, unknown ``main`` keys are present, or ``rfcs`` is empty
        or contains malformed entries.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from rfc_assembler.config import load_assembly_config
    >>> config = load_assembly_config(Path("rfcs.yaml"))  # doctest: +SKIP
    >>> config.rfcs[0].title  # doctest: +SKIP
    'Overview'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise ConfigurationError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    main = _build_main_config(raw.get("main"))
    rfcs = _build_fragment_entries(raw.get("rfcs"))
    return AssemblyConfig(
        main=main,
        rfcs=rfcs,
        root=root if root is not None else path.resolve().parent,
    )


def _build_main_config(payload: object) -> MainConfig:
    """Validate the ``main`` block and return a MainConfig."""
    if not isinstance(payload, cabc.Mapping):
        msg = "Configuration is missing a 'main' mapping."
        raise ConfigurationError(msg)

    unknown = sorted(set(payload) - set(REQUIRED_MAIN_KEYS) - set(OPTIONAL_MAIN_KEYS))
    if unknown:
        msg = f"Unknown keys in [main] for config: {', '.join(map(str, unknown))}"
        raise ConfigurationError(msg)

    values = {key: _required_str(payload, key) for key in REQUIRED_MAIN_KEYS}
    github = payload.get("github") or ""
    if not isinstance(github, str):
        msg = "'github' in [main] must be a string."
        raise ConfigurationError(msg)

    return MainConfig(
        **values,
        github=github.rstrip("/"),
        verbatim=_string_tuple(payload.get("verbatim"), "verbatim"),
        terminate_headings=_flag(
            payload.get("terminate_headings"), "terminate_headings"
        ),
    )


def _required_str(payload: cabc.Mapping[str, typ.Any], key: str) -> str:
    """Return a stripped, non-empty string value for ``key``."""
    value = payload.get(key)
    match value:
        case str() if value.strip():
            return value.strip()
        case str() | None:
            msg = f"No {key} found in [main] for config"
        case _:
            msg = f"'{key}' in [main] must be a string, got {type(value).__name__}"
    raise ConfigurationError(msg)


def _string_tuple(value: object, key: str) -> tuple[str, ...]:
    """Normalize a string or list of strings into a tuple of names."""
    match value:
        case None:
            return ()
        case str():
            return (value,)
        case list() if all(isinstance(item, str) for item in value):
            return tuple(value)
        case _:
            msg = f"'{key}' in [main] must be a string or a list of strings."
            raise ConfigurationError(msg)


def _flag(value: object, key: str) -> bool:
    """Return the boolean ``key`` from ``[main]``, defaulting to ``False``."""
    if value is None:
        return False
    if not isinstance(value, bool):
        msg = f"'{key}' in [main] must be true or false."
        raise ConfigurationError(msg)
    return value


def _build_fragment_entries(payload: object) -> list[FragmentEntry]:
    """Validate the ordered ``rfcs`` sequence and return FragmentEntry items."""
    if not isinstance(payload, list) or not payload:
        msg = "No rfcs defined in configuration."
        raise ConfigurationError(msg)

    entries: list[FragmentEntry] = []
    for position, item in enumerate(payload, start=1):
        if not isinstance(item, cabc.Mapping):
            msg = (
                f"rfcs entry {position} must be a mapping with 'title' and "
                "'filename'."
            )
            raise ConfigurationError(msg)
        title = item.get("title")
        filename = item.get("filename")
        if not isinstance(title, str) or not title.strip():
            msg = f"rfcs entry {position} is missing 'title'."
            raise ConfigurationError(msg)
        if not isinstance(filename, str) or not filename.strip():
            msg = f"rfcs entry {position} ('{title}') is missing 'filename'."
            raise ConfigurationError(msg)
        entries.append(FragmentEntry(title=title.strip(), filename=filename.strip()))
    return entries


__all__ = ["load_assembly_config"]
