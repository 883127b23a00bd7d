"""Unit tests for JSX -> SVG markup conversion."""

import pytest

from jsx_svg_preview.config.models import ConversionConfig
from jsx_svg_preview.conversion.converter import (
    MarkupConverter,
    format_attribute_value,
)
from jsx_svg_preview.extraction.extractor import ComponentExtractor
from jsx_svg_preview.models import ComponentRecord, DiagnosticKind, Expression


@pytest.fixture
def converter():
    """Create a converter with default settings."""
    return MarkupConverter()


def first_record(source: str) -> ComponentRecord:
    return ComponentExtractor().extract(source)[0]


class TestElementMapping:
    """Test element name mapping."""

    def test_circle_converts(self, converter):
        """A Circle converts to a self-closed SVG circle."""
        record = first_record('<Circle cx="50" cy="50" r="25" fill="#007ACC" />')
        assert converter.convert(record) == '<circle cx="50" cy="50" r="25" fill="#007ACC" />'

    @pytest.mark.parametrize(
        "element,tag",
        [
            ("Rect", "rect"),
            ("Path", "path"),
            ("Line", "line"),
            ("Polygon", "polygon"),
            ("Polyline", "polyline"),
            ("Ellipse", "ellipse"),
        ],
    )
    def test_primitives_self_close(self, converter, element, tag):
        """Shape primitives without content self-close."""
        record = ComponentRecord(element_type=element, attributes={"x": 1})
        assert converter.convert(record) == f'<{tag} x="1" />'

    @pytest.mark.parametrize("element,tag", [("Svg", "svg"), ("G", "g"), ("Text", "text")])
    def test_containers_always_have_closing_tag(self, converter, element, tag):
        """Container elements keep explicit tags even when empty."""
        record = ComponentRecord(element_type=element)
        assert converter.convert(record) == f"<{tag}></{tag}>"

    def test_camel_case_svg_names(self, converter):
        """Names lowercasing would break are mapped explicitly."""
        record = ComponentRecord(element_type="LinearGradient", attributes={"id": "g"})
        assert converter.convert(record) == '<linearGradient id="g"></linearGradient>'
        assert converter.output_tag("ClipPath") == "clipPath"
        assert converter.output_tag("TSpan") == "tspan"

    def test_fallback_lowercases_and_wraps(self, converter):
        """Unmapped vocabulary members are lowercased and wrapped."""
        diagnostics = []
        record = ComponentRecord(
            element_type="Mask", attributes={"id": "m"}, inner_content="<Rect />"
        )
        markup = converter.convert(record, diagnostics=diagnostics)
        assert markup == '<mask id="m"><Rect /></mask>'
        assert diagnostics[0].kind == DiagnosticKind.CONVERSION_FALLBACK

    def test_fallback_empty_content(self, converter):
        """Fallback elements get explicit tags even without content."""
        record = ComponentRecord(element_type="Defs", attributes={"id": "d"})
        assert converter.convert(record) == '<defs id="d"></defs>'

    @pytest.mark.parametrize(
        "source,expected",
        [
            ('<Use href="#a" />', '<use href="#a" />'),
            ('<Image href="a.png" width="10" />', '<image href="a.png" width="10" />'),
            ('<Stop offset="0" stopColor="#fff" />', '<stop offset="0" stop-color="#fff" />'),
        ],
    )
    def test_empty_leaf_elements_self_close(self, converter, source, expected):
        """Leaf elements without content use the self-closing form."""
        diagnostics = []
        assert converter.convert(first_record(source), diagnostics=diagnostics) == expected
        assert diagnostics == []

    def test_overflowing_number_kept_verbatim(self, converter):
        """A decimal too large for a float is emitted as written."""
        raw = "9" * 400 + ".0"
        record = first_record(f'<Rect width="{raw}" />')
        assert converter.convert(record) == f'<rect width="{raw}" />'

    def test_primitive_with_content_keeps_it(self, converter):
        """Primitives with children are not self-closed."""
        record = ComponentRecord(element_type="Rect", inner_content="<title>t</title>")
        assert converter.convert(record) == "<rect><title>t</title></rect>"


class TestAttributeSerialization:
    """Test attribute value and name serialization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (50, "50"),
            (-3, "-3"),
            (1.5, "1.5"),
            (2.0, "2"),
            (0.0000001, "0.0000001"),
            (True, "true"),
            ("#333", "#333"),
            (Expression(source="x"), "[Expression]"),
        ],
    )
    def test_format_values(self, value, expected):
        """Values are coerced to their string representation."""
        assert format_attribute_value(value) == expected

    def test_camel_case_props_translated(self, converter):
        """react-native-svg props become SVG attribute names."""
        record = ComponentRecord(
            element_type="Rect",
            attributes={"strokeWidth": 2, "fillOpacity": 0.5, "xlinkHref": "#a", "viewBox": "0 0 1 1"},
        )
        assert converter.convert(record) == (
            '<rect stroke-width="2" fill-opacity="0.5" xlink:href="#a" viewBox="0 0 1 1" />'
        )

    def test_translation_can_be_disabled(self):
        """Attribute names pass through when translation is off."""
        converter = MarkupConverter(ConversionConfig(translate_attribute_names=False))
        record = ComponentRecord(element_type="Rect", attributes={"strokeWidth": 2})
        assert converter.convert(record) == '<rect strokeWidth="2" />'

    def test_values_are_escaped(self, converter):
        """Quotes and ampersands are escaped for well-formed output."""
        record = ComponentRecord(element_type="Text", attributes={"title": 'a "b" & <c>'})
        assert converter.convert(record) == (
            '<text title="a &quot;b&quot; &amp; &lt;c&gt;"></text>'
        )

    def test_bare_and_expression_values(self, converter):
        """Boolean true and expressions render as text."""
        record = first_record("<Svg focusable width={w}></Svg>")
        assert converter.convert(record) == '<svg focusable="true" width="[Expression]"></svg>'

    def test_source_order(self, converter):
        """Attributes are emitted in source order."""
        record = first_record('<Rect y="1" x="2" />')
        assert converter.convert(record) == '<rect y="1" x="2" />'


class TestContentConversion:
    """Test shallow and deep conversion of inner content."""

    SOURCE = (
        '<Svg width="120" height="80"><Rect x="10" y="10" width="100" height="60" '
        'fill="#FF6B6B" stroke="#333" strokeWidth="2" /></Svg>'
    )

    def test_shallow_copies_inner_text(self, converter):
        """Shallow conversion keeps inner content verbatim."""
        record = first_record(self.SOURCE)
        markup = converter.convert(record)
        assert markup.startswith('<svg width="120" height="80"><Rect x="10"')
        assert markup.endswith("</svg>")

    def test_deep_converts_children(self, converter):
        """Deep conversion maps nested elements too."""
        record = first_record(self.SOURCE)
        assert converter.convert(record, deep=True) == (
            '<svg width="120" height="80"><rect x="10" y="10" width="100" height="60" '
            'fill="#FF6B6B" stroke="#333" stroke-width="2" /></svg>'
        )

    def test_deep_keeps_text_between_children(self, converter):
        """Text around nested elements is preserved."""
        record = first_record("<Text x='5'>Hello <TSpan dy='2'>world</TSpan>!</Text>")
        assert converter.convert(record, deep=True) == (
            '<text x="5">Hello <tspan dy="2">world</tspan>!</text>'
        )

    def test_deep_nested_groups(self, converter):
        """Deep conversion recurses through several levels."""
        record = first_record("<Svg><G><G><Circle r='1' /></G></G></Svg>")
        assert converter.convert(record, deep=True) == (
            '<svg><g><g><circle r="1" /></g></g></svg>'
        )

    def test_config_enables_deep(self):
        """ConversionConfig.deep is the default mode."""
        converter = MarkupConverter(ConversionConfig(deep=True))
        record = first_record("<G><Circle /></G>")
        assert converter.convert(record) == "<g><circle /></g>"

    def test_convert_all_pairs(self, converter):
        """convert_all pairs each record with its markup."""
        records = ComponentExtractor().extract("<Circle /><Rect />")
        pairs = converter.convert_all(records)
        assert [markup for _r, markup in pairs] == ["<circle />", "<rect />"]
        assert pairs[0][0] is records[0]


class TestStandalone:
    """Test standalone fragment wrapping."""

    def test_primitive_is_wrapped(self, converter):
        """Non-svg elements get an svg root."""
        record = first_record('<Circle r="5" />')
        assert converter.to_standalone(record) == (
            '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
            '<circle r="5" /></svg>'
        )

    def test_svg_is_not_wrapped(self, converter):
        """An svg root is returned as is."""
        record = first_record('<Svg width="10"></Svg>')
        assert converter.to_standalone(record) == '<svg width="10"></svg>'

    def test_preview_size_configurable(self):
        """Wrapper size follows the config."""
        converter = MarkupConverter(ConversionConfig(preview_width=40, preview_height=30))
        markup = converter.to_standalone(ComponentRecord(element_type="Rect"))
        assert 'width="40" height="30"' in markup
