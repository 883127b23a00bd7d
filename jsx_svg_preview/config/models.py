"""Configuration models for SVG preview generation.

This module provides the Pydantic configuration models controlling
extraction depth, markup conversion, document rendering, and logging.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..models import DEFAULT_EXPRESSION_MARKER


class ExtractionConfig(BaseModel):
    """Settings for the component extractor."""

    model_config = ConfigDict(extra="forbid")

    recursive: bool = Field(
        default=False, description="Build records for nested elements too"
    )
    max_depth: int = Field(
        default=32, ge=1, le=256, description="Maximum nesting depth to recurse into"
    )
    expression_marker: str = Field(
        default=DEFAULT_EXPRESSION_MARKER,
        min_length=1,
        description="Placeholder stored for brace-delimited attribute values",
    )


class ConversionConfig(BaseModel):
    """Settings for JSX -> SVG markup conversion."""

    model_config = ConfigDict(extra="forbid")

    deep: bool = Field(
        default=False, description="Convert nested elements instead of copying raw text"
    )
    translate_attribute_names: bool = Field(
        default=True, description="Rename camelCase props to SVG attribute names"
    )
    preview_width: int = Field(
        default=100, ge=1, le=10000, description="Width of standalone previews"
    )
    preview_height: int = Field(
        default=100, ge=1, le=10000, description="Height of standalone previews"
    )


class RenderConfig(BaseModel):
    """Settings for the preview document."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="SVG Preview", description="Document title")
    condensed: bool = Field(
        default=False, description="Emit bare markup fragments instead of a document"
    )
    include_jsx: bool = Field(
        default=True, description="Show the JSX summary for each component"
    )
    include_attributes: bool = Field(
        default=True, description="Show the attribute dump for each component"
    )


class LoggingConfig(BaseModel):
    """Logging verbosity."""

    model_config = ConfigDict(extra="forbid")

    debug: bool = Field(default=False, description="Enable debug logging")
    verbose: bool = Field(default=False, description="Enable info logging")


class PreviewConfig(BaseModel):
    """Top-level configuration for the preview pipeline.

    Groups the per-stage settings; every section has usable defaults so
    ``PreviewConfig()`` is a complete configuration.
    """

    model_config = ConfigDict(extra="forbid")

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
