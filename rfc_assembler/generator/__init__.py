"""Rendering, writing, and orchestration for RFC document assembly."""

from .assembler import RFCAssembler
from .models import Artifact
from .renderer import TemplateRenderer
from .toc import TocInjector
from .writer import OutputWriter

__all__ = [
    "Artifact",
    "OutputWriter",
    "RFCAssembler",
    "TemplateRenderer",
    "TocInjector",
]
