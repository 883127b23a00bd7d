"""JSX SVG Preview - extract react-native-svg style markup and render it as SVG

Finds graphics components (Svg, Circle, Rect, G, ...) in JSX/TSX source
text, parses their attributes, converts them to standard SVG markup and
assembles an HTML preview document.
"""

__version__ = "0.1.0"

from .config import PreviewConfig, load_config
from .conversion import MarkupConverter
from .exceptions import ConfigError, PreviewError
from .extraction import ComponentExtractor, ElementMatcher, parse_attributes
from .models import (
    SVG_VOCABULARY,
    ComponentRecord,
    Diagnostic,
    DiagnosticKind,
    Expression,
    ExtractionResult,
)
from .pipeline import PreviewOutput, PreviewPipeline, preview_source
from .rendering import DocumentAssembler, render_fragment
from .session import PreviewSession

__all__ = [
    "PreviewConfig",
    "load_config",
    "ComponentRecord",
    "Expression",
    "Diagnostic",
    "DiagnosticKind",
    "ExtractionResult",
    "SVG_VOCABULARY",
    "parse_attributes",
    "ElementMatcher",
    "ComponentExtractor",
    "MarkupConverter",
    "DocumentAssembler",
    "render_fragment",
    "PreviewPipeline",
    "PreviewOutput",
    "preview_source",
    "PreviewSession",
    "PreviewError",
    "ConfigError",
]
