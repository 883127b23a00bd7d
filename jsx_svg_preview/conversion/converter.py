"""Conversion of JSX component records into standard SVG markup.

Element names and react-native-svg prop names are mapped to their SVG
equivalents through explicit tables. Elements missing from the table are
lowered to a lowercase tag with explicit open/close tags; attributes missing
from the table pass through unchanged.
"""

from decimal import Decimal
from xml.sax.saxutils import escape

from ..config.models import ConversionConfig
from ..extraction.extractor import ComponentExtractor
from ..models import (
    AttributeValue,
    ComponentRecord,
    Diagnostic,
    DiagnosticKind,
    Expression,
)
from ..preview_logging import get_logger

logger = get_logger("conversion")

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Vocabulary element -> SVG tag
ELEMENT_TAGS: dict[str, str] = {
    "Svg": "svg",
    "Circle": "circle",
    "Rect": "rect",
    "Path": "path",
    "Line": "line",
    "Polygon": "polygon",
    "Polyline": "polyline",
    "Ellipse": "ellipse",
    "G": "g",
    "Text": "text",
    "Use": "use",
    "Image": "image",
    "Stop": "stop",
    # Camel-case SVG names that lowercasing would break
    "TSpan": "tspan",
    "TextPath": "textPath",
    "LinearGradient": "linearGradient",
    "RadialGradient": "radialGradient",
    "ClipPath": "clipPath",
    "ForeignObject": "foreignObject",
}

# Tags written as <tag ... /> when they have no content
SELF_CLOSING_TAGS: frozenset[str] = frozenset(
    {
        "circle",
        "rect",
        "path",
        "line",
        "polygon",
        "polyline",
        "ellipse",
        "use",
        "image",
        "stop",
    }
)

# react-native-svg prop -> SVG presentation attribute
ATTRIBUTE_NAMES: dict[str, str] = {
    "strokeWidth": "stroke-width",
    "strokeOpacity": "stroke-opacity",
    "strokeLinecap": "stroke-linecap",
    "strokeLinejoin": "stroke-linejoin",
    "strokeDasharray": "stroke-dasharray",
    "strokeDashoffset": "stroke-dashoffset",
    "strokeMiterlimit": "stroke-miterlimit",
    "fillOpacity": "fill-opacity",
    "fillRule": "fill-rule",
    "clipPath": "clip-path",
    "clipRule": "clip-rule",
    "fontSize": "font-size",
    "fontFamily": "font-family",
    "fontWeight": "font-weight",
    "fontStyle": "font-style",
    "fontVariant": "font-variant",
    "fontStretch": "font-stretch",
    "textAnchor": "text-anchor",
    "textDecoration": "text-decoration",
    "letterSpacing": "letter-spacing",
    "wordSpacing": "word-spacing",
    "alignmentBaseline": "alignment-baseline",
    "baselineShift": "baseline-shift",
    "dominantBaseline": "dominant-baseline",
    "stopColor": "stop-color",
    "stopOpacity": "stop-opacity",
    "markerStart": "marker-start",
    "markerMid": "marker-mid",
    "markerEnd": "marker-end",
    "vectorEffect": "vector-effect",
    "xlinkHref": "xlink:href",
}


def format_attribute_value(value: AttributeValue) -> str:
    """Render an attribute value as attribute text (unescaped).

    Numbers use plain decimal notation, ``True`` becomes ``true`` and
    expressions become their placeholder marker.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Expression):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


class MarkupConverter:
    """Converts ComponentRecords into SVG element strings."""

    def __init__(
        self,
        config: ConversionConfig | None = None,
        extractor: ComponentExtractor | None = None,
    ):
        """Initialize the converter.

        Args:
            config: Conversion settings. Defaults to ConversionConfig().
            extractor: Extractor used for deep conversion of inner content.
        """
        self.config = config or ConversionConfig()
        self.extractor = extractor or ComponentExtractor()

    def output_tag(
        self, element_type: str, diagnostics: list[Diagnostic] | None = None
    ) -> str:
        """Map a vocabulary element to its SVG tag name."""
        tag = ELEMENT_TAGS.get(element_type)
        if tag is not None:
            return tag

        tag = element_type.lower()
        logger.debug(f"No explicit mapping for <{element_type}>, using <{tag}>")
        if diagnostics is not None:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.CONVERSION_FALLBACK,
                    message=f"<{element_type}> lowered to <{tag}>",
                )
            )
        return tag

    def attribute_name(self, name: str) -> str:
        if not self.config.translate_attribute_names:
            return name
        return ATTRIBUTE_NAMES.get(name, name)

    def serialize_attributes(self, attributes: dict[str, AttributeValue]) -> str:
        """Serialize attributes as ``name="value"`` pairs in source order."""
        parts = []
        for name, value in attributes.items():
            text = escape(format_attribute_value(value), {'"': "&quot;"})
            parts.append(f'{self.attribute_name(name)}="{text}"')
        return " ".join(parts)

    def convert(
        self,
        record: ComponentRecord,
        deep: bool | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> str:
        """Convert one record to an SVG element string.

        Args:
            record: Record to convert.
            deep: Override ``config.deep``. Deep conversion re-extracts the
                inner content and converts nested elements too; otherwise
                inner content is copied as raw text.
            diagnostics: Optional list receiving CONVERSION_FALLBACK entries.

        Returns:
            SVG markup for the element.
        """
        deep = self.config.deep if deep is None else deep
        return self._convert(record, deep, 0, diagnostics)

    def convert_all(
        self,
        records: list[ComponentRecord],
        deep: bool | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> list[tuple[ComponentRecord, str]]:
        """Convert records, pairing each with its markup."""
        return [(record, self.convert(record, deep, diagnostics)) for record in records]

    def to_standalone(
        self,
        record: ComponentRecord,
        deep: bool | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> str:
        """Convert a record into markup that renders on its own.

        Non-``svg`` elements are wrapped in an ``<svg>`` root sized by the
        configured preview dimensions.
        """
        markup = self.convert(record, deep, diagnostics)
        if ELEMENT_TAGS.get(record.element_type) == "svg":
            return markup

        return (
            f'<svg xmlns="{SVG_NAMESPACE}" '
            f'width="{self.config.preview_width}" '
            f'height="{self.config.preview_height}">'
            f"{markup}</svg>"
        )

    def _convert(
        self,
        record: ComponentRecord,
        deep: bool,
        depth: int,
        diagnostics: list[Diagnostic] | None,
    ) -> str:
        tag = self.output_tag(record.element_type, diagnostics)
        attributes = self.serialize_attributes(record.attributes)
        opening = f"<{tag} {attributes}" if attributes else f"<{tag}"

        content = record.inner_content
        if deep and content and depth < self.extractor.config.max_depth:
            content = self._convert_content(content, depth, diagnostics)

        if not content and tag in SELF_CLOSING_TAGS:
            return f"{opening} />"
        return f"{opening}>{content}</{tag}>"

    def _convert_content(
        self,
        content: str,
        depth: int,
        diagnostics: list[Diagnostic] | None,
    ) -> str:
        """Replace every vocabulary element in ``content`` with SVG markup.

        Text between elements is kept as is.
        """
        pieces: list[str] = []
        cursor = 0

        for child in self.extractor.extract(content, recursive=False):
            start, end = child.source_extent
            pieces.append(content[cursor:start])
            pieces.append(self._convert(child, True, depth + 1, diagnostics))
            cursor = end

        pieces.append(content[cursor:])
        return "".join(pieces)
