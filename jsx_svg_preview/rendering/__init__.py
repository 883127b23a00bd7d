"""Rendering of converted markup into documents and summaries."""

from .assembler import (
    NO_COMPONENTS_COMMENT,
    NO_COMPONENTS_MESSAGE,
    DocumentAssembler,
    render_fragment,
)
from .reporter import JSONReporter, TextReporter

__all__ = [
    # Document assembly
    "DocumentAssembler",
    "render_fragment",
    "NO_COMPONENTS_MESSAGE",
    "NO_COMPONENTS_COMMENT",
    # Reporters
    "TextReporter",
    "JSONReporter",
]
