"""Data models for SVG component extraction.

This module defines the closed element vocabulary, the component records
produced by extraction, and the diagnostics collected while scanning.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Graphics element names recognised in the JSX dialect. Matching is
# case-sensitive; anything else is ordinary source text.
SVG_VOCABULARY: frozenset[str] = frozenset(
    {
        "Svg",
        "Circle",
        "Ellipse",
        "G",
        "Text",
        "TSpan",
        "TextPath",
        "Path",
        "Polygon",
        "Polyline",
        "Line",
        "Rect",
        "Use",
        "Image",
        "Symbol",
        "Defs",
        "LinearGradient",
        "RadialGradient",
        "Stop",
        "ClipPath",
        "Pattern",
        "Mask",
        "ForeignObject",
    }
)

DEFAULT_EXPRESSION_MARKER = "[Expression]"


def is_vocabulary_element(name: str) -> bool:
    """Check whether a tag name belongs to the graphics vocabulary."""
    return name in SVG_VOCABULARY


@dataclass(frozen=True)
class Expression:
    """Opaque stand-in for a brace-delimited attribute value.

    The expression text is kept for inspection only and is never evaluated.
    """

    source: str
    marker: str = DEFAULT_EXPRESSION_MARKER

    def __str__(self) -> str:
        return self.marker


AttributeValue = Union[bool, int, float, str, Expression]


class DiagnosticKind(Enum):
    """Kinds of non-fatal problems recorded during extraction/conversion."""

    PARSE_SKIP = "parse_skip"
    UNTERMINATED_ELEMENT = "unterminated_element"
    CONVERSION_FALLBACK = "conversion_fallback"


@dataclass(frozen=True)
class Diagnostic:
    """A skipped fragment or fallback, reported alongside results."""

    kind: DiagnosticKind
    message: str
    offset: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "offset": self.offset,
        }


def attribute_to_json(value: AttributeValue) -> bool | int | float | str:
    """Convert an attribute value to a JSON-compatible value."""
    if isinstance(value, Expression):
        return str(value)
    return value


@dataclass(frozen=True)
class ComponentRecord:
    """One matched vocabulary element.

    Attributes:
        element_type: Vocabulary element name (e.g. ``"Circle"``)
        attributes: Attribute name -> typed value, in source order
        inner_content: Trimmed text between the tags ("" if self-closing)
        source_extent: Absolute [start, end) offsets in the scanned text
        self_closing: Whether the element used the ``/>`` form
        opening_tag: Verbatim opening tag text
        children: Nested records (recursive extraction only)
    """

    element_type: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    inner_content: str = ""
    source_extent: tuple[int, int] | None = None
    self_closing: bool = False
    opening_tag: str = ""
    children: tuple[ComponentRecord, ...] = field(default_factory=tuple)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def iter_tree(self) -> Iterator[ComponentRecord]:
        """Yield this record and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def jsx_summary(self) -> str:
        """Condensed JSX form, e.g. ``<Rect x="10" fill={...} />``."""
        parts = [f"<{self.element_type}"]
        for name, value in self.attributes.items():
            if value is True:
                parts.append(f" {name}")
            elif isinstance(value, Expression):
                parts.append(f" {name}={{...}}")
            else:
                parts.append(f' {name}="{value}"')

        if self.self_closing or not self.inner_content:
            parts.append(" />")
        else:
            parts.append(f">...</{self.element_type}>")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "element_type": self.element_type,
            "attributes": {
                name: attribute_to_json(value)
                for name, value in self.attributes.items()
            },
            "inner_content": self.inner_content,
            "source_extent": list(self.source_extent) if self.source_extent else None,
            "self_closing": self.self_closing,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class ExtractionResult:
    """Result of extracting components from one source text."""

    display_id: str
    components: list[ComponentRecord] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    extraction_time_ms: float = 0.0

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def has_components(self) -> bool:
        return len(self.components) > 0

    @property
    def skip_count(self) -> int:
        """Number of fragments that were skipped rather than extracted."""
        return sum(
            1
            for d in self.diagnostics
            if d.kind
            in (DiagnosticKind.PARSE_SKIP, DiagnosticKind.UNTERMINATED_ELEMENT)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "display_id": self.display_id,
            "components": [c.to_dict() for c in self.components],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "extraction_time_ms": self.extraction_time_ms,
            "component_count": self.component_count,
        }
