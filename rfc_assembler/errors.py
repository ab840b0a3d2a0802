"""Exception hierarchy raised while assembling RFC documents."""

from __future__ import annotations


class RFCAssemblyError(Exception):
    """Base class for every fatal assembly failure."""


class ConfigurationError(RFCAssemblyError, ValueError):
    """Raised when the configuration or the files it names are invalid."""


class StructuralError(RFCAssemblyError):
    """Raised when a fragment or host file has an unsupported structure."""


class RenderError(RFCAssemblyError):
    """Raised when a template references or receives unexpected values."""


__all__ = [
    "ConfigurationError",
    "RFCAssemblyError",
    "RenderError",
    "StructuralError",
]
