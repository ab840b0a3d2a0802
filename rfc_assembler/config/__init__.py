"""Load and validate the YAML configuration for an RFC assembly run.

This subpackage parses the project's ``rfcs.yaml`` file, checks the ``main``
block for the directories, README, TOC host, and marker token the generator
needs, and returns strongly typed dataclasses (:class:`AssemblyConfig`,
:class:`MainConfig`, :class:`FragmentEntry`) that the sequencer and assembler
consume. The primary entry point is :func:`load_assembly_config`.

Examples
--------
>>> from pathlib import Path
>>> from rfc_assembler.config import load_assembly_config
>>> config = load_assembly_config(Path("rfcs.yaml"))  # doctest: +SKIP
>>> config.main.toc_marker  # doctest: +SKIP
'{{TOC}}'
"""

from .loader import load_assembly_config
from .models import AssemblyConfig, FragmentEntry, MainConfig

__all__ = [
    "AssemblyConfig",
    "FragmentEntry",
    "MainConfig",
    "load_assembly_config",
]
