"""
Performance benchmark tests for the extraction core.

These tests check that scanning stays roughly linear in input size,
including on inputs that defeat naive regex matching:
- Many unterminated openers, including unbalanced braces and quotes
- Stray closing tags under deep unclosed nesting
- Deeply nested same-name groups
- Large files with many components
"""

import time

import pytest

from jsx_svg_preview.conversion.converter import MarkupConverter
from jsx_svg_preview.extraction.extractor import ComponentExtractor

pytestmark = [
    pytest.mark.benchmark,
    pytest.mark.slow,
]

# Performance targets (in seconds)
LARGE_FILE_TARGET = 2.0
PATHOLOGICAL_TARGET = 2.0


def _timed(func, *args, **kwargs):
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return result, time.perf_counter() - start


class TestExtractionPerformance:
    """Extraction time on large and adversarial inputs."""

    def test_many_components(self):
        """Thousands of components extract quickly."""
        source = "\n".join(
            f'<Svg width="{i}"><Circle cx="{i}" r="2" /></Svg>' for i in range(5000)
        )
        records, elapsed = _timed(ComponentExtractor().extract, source, recursive=True)
        assert len(records) == 10000
        assert elapsed < LARGE_FILE_TARGET

    def test_unterminated_openers(self):
        """Many '<G ' openers without '>' do not cause quadratic rescans."""
        source = "<G x " * 20000
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert records == []
        assert elapsed < PATHOLOGICAL_TARGET

    def test_unbalanced_brace_openers(self):
        """Many '<Rect {' openers do not each scan to the end of the text."""
        source = "<Rect {" * 8000
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert records == []
        assert elapsed < PATHOLOGICAL_TARGET

    def test_unterminated_string_in_braces(self):
        """Unterminated JS strings inside braces stay bounded too."""
        source = "<Rect a={'" * 8000
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert records == []
        assert elapsed < PATHOLOGICAL_TARGET

    def test_unbalanced_braces_before_valid_element(self):
        """A valid element after many broken openers is still found."""
        source = "<Rect {" * 8000 + '<Circle r="1" />'
        result, elapsed = _timed(ComponentExtractor().analyze, source)
        assert [r.element_type for r in result.components] == ["Circle"]
        assert result.skip_count == 8000
        assert elapsed < PATHOLOGICAL_TARGET

    def test_stray_closers_under_deep_nesting(self):
        """Closing tags with no opener cost the same at any stack depth."""
        source = "<G>" * 20000 + "</Svg>" * 20000
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert records == []
        assert elapsed < PATHOLOGICAL_TARGET

    def test_deep_unclosed_nesting_with_children(self):
        """Promoting children through many unclosed levels stays linear."""
        source = "<G><Rect />" * 20000
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert len(records) == 20000
        assert all(r.element_type == "Rect" for r in records)
        assert elapsed < PATHOLOGICAL_TARGET

    def test_unclosed_containers(self):
        """Many '<G>' without closing tags resolve in one pass."""
        source = "<G>" * 20000 + "<Circle />"
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert [r.element_type for r in records] == ["Circle"]
        assert elapsed < PATHOLOGICAL_TARGET

    def test_deep_same_name_nesting(self):
        """Deeply nested groups pair correctly and quickly."""
        depth = 200
        source = "<G>" * depth + "<Rect />" + "</G>" * depth
        records, elapsed = _timed(ComponentExtractor().extract, source)
        assert len(records) == 1
        assert records[0].inner_content == "<G>" * (depth - 1) + "<Rect />" + "</G>" * (depth - 1)
        assert elapsed < PATHOLOGICAL_TARGET

    def test_deep_conversion_bounded(self):
        """Deep conversion of nested groups completes."""
        depth = 30
        source = "<G>" * depth + "<Rect />" + "</G>" * depth
        record = ComponentExtractor().extract(source)[0]
        markup, elapsed = _timed(MarkupConverter().convert, record, deep=True)
        assert markup == "<g>" * depth + "<rect />" + "</g>" * depth
        assert elapsed < PATHOLOGICAL_TARGET
