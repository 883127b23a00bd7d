"""Conversion of extracted components into standard SVG markup."""

from .converter import (
    ATTRIBUTE_NAMES,
    ELEMENT_TAGS,
    SELF_CLOSING_TAGS,
    MarkupConverter,
    format_attribute_value,
)

__all__ = [
    "MarkupConverter",
    "format_attribute_value",
    "ELEMENT_TAGS",
    "ATTRIBUTE_NAMES",
    "SELF_CLOSING_TAGS",
]
