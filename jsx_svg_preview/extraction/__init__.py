"""Extraction of graphics components from JSX source text."""

from .attributes import coerce_literal, parse_attributes
from .extractor import ComponentExtractor
from .matcher import ElementMatcher, ElementSpan

__all__ = [
    # Attribute parsing
    "parse_attributes",
    "coerce_literal",
    # Element matching
    "ElementMatcher",
    "ElementSpan",
    # Component extraction
    "ComponentExtractor",
]
