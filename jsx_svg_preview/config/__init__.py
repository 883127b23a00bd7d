"""Configuration for the SVG preview pipeline."""

from .config_loader import ConfigLoader, load_config
from .models import (
    ConversionConfig,
    ExtractionConfig,
    LoggingConfig,
    PreviewConfig,
    RenderConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "PreviewConfig",
    "ExtractionConfig",
    "ConversionConfig",
    "RenderConfig",
    "LoggingConfig",
]
