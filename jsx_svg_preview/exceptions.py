"""Exceptions raised by the SVG preview package.

Extraction and conversion never raise for malformed source text; they
record diagnostics instead. These exceptions cover configuration and
caller mistakes only.
"""


class PreviewError(Exception):
    """Base class for SVG preview errors."""


class ConfigError(PreviewError):
    """Configuration file could not be read or failed validation."""
