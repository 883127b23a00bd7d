"""Component extraction from JSX source text.

This module provides the ComponentExtractor, which drives the element
matcher over a whole source file and builds ComponentRecord objects from
the matched spans.
"""

import time

from ..config.models import ExtractionConfig
from ..models import ComponentRecord, Diagnostic, ExtractionResult
from ..preview_logging import get_logger
from .attributes import parse_attributes
from .matcher import ElementMatcher, ElementSpan

logger = get_logger("extraction")


class ComponentExtractor:
    """Extracts graphics component records from source text.

    Shallow extraction (the default) returns one record per top-level
    element and leaves nested markup in ``inner_content`` as raw text.
    Recursive extraction also builds records for every nested element.

    The extractor keeps no state between calls; a single instance can be
    shared freely.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        matcher: ElementMatcher | None = None,
    ):
        """Initialize the extractor.

        Args:
            config: Extraction settings. Defaults to ExtractionConfig().
            matcher: Element matcher to use. Defaults to the built-in
                vocabulary matcher.
        """
        self.config = config or ExtractionConfig()
        self.matcher = matcher or ElementMatcher()

    def extract(
        self,
        source: str,
        recursive: bool | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> list[ComponentRecord]:
        """Extract component records in source order.

        Args:
            source: Full source text.
            recursive: Override ``config.recursive``. When recursive, the
                result is flattened in pre-order (each element followed by
                its descendants) and every record carries its children.
            diagnostics: Optional list receiving skip diagnostics.

        Returns:
            Ordered list of records; empty when nothing matched.
        """
        roots = self.extract_tree(source, recursive=recursive, diagnostics=diagnostics)
        if not self._is_recursive(recursive):
            return roots

        flattened: list[ComponentRecord] = []
        for root in roots:
            flattened.extend(root.iter_tree())
        return flattened

    def extract_tree(
        self,
        source: str,
        recursive: bool | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> list[ComponentRecord]:
        """Extract only top-level records.

        With recursion enabled, nested records hang off ``children``.
        """
        if not source:
            return []

        max_depth = self.config.max_depth if self._is_recursive(recursive) else 0
        collected: list[Diagnostic] = []
        roots = self._extract_level(source, 0, 0, max_depth, collected)

        if diagnostics is not None:
            # Inner levels rescan text the outer scan has already reported on
            seen: set[tuple] = set()
            for diagnostic in collected:
                key = (diagnostic.kind, diagnostic.offset)
                if key not in seen:
                    seen.add(key)
                    diagnostics.append(diagnostic)

        return roots

    def analyze(
        self,
        source: str,
        display_id: str = "",
        recursive: bool | None = None,
    ) -> ExtractionResult:
        """Extract components and collect diagnostics and timing.

        Args:
            source: Full source text.
            display_id: Human-readable identifier (e.g. file name).
            recursive: Override ``config.recursive``.

        Returns:
            ExtractionResult for the source.
        """
        start_time = time.perf_counter()
        diagnostics: list[Diagnostic] = []

        components = self.extract(source, recursive=recursive, diagnostics=diagnostics)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if components:
            logger.info(
                f"Extracted {len(components)} component(s) from "
                f"{display_id or '<source>'} in {elapsed_ms:.1f}ms"
            )
        else:
            logger.info(f"No SVG components found in {display_id or '<source>'}")

        return ExtractionResult(
            display_id=display_id,
            components=components,
            diagnostics=diagnostics,
            extraction_time_ms=elapsed_ms,
        )

    def _is_recursive(self, recursive: bool | None) -> bool:
        return self.config.recursive if recursive is None else recursive

    def _extract_level(
        self,
        text: str,
        base_offset: int,
        depth: int,
        max_depth: int,
        diagnostics: list[Diagnostic] | None,
    ) -> list[ComponentRecord]:
        """Build records for the top-level spans of ``text``."""
        records: list[ComponentRecord] = []

        for span in self.matcher.find_spans(text, diagnostics, base_offset):
            records.append(
                self._build_record(
                    text, span, base_offset, depth, max_depth, diagnostics
                )
            )

        return records

    def _build_record(
        self,
        text: str,
        span: ElementSpan,
        base_offset: int,
        depth: int,
        max_depth: int,
        diagnostics: list[Diagnostic] | None,
    ) -> ComponentRecord:
        """Create one ComponentRecord from a matched span."""
        opening_tag = span.opening_tag(text)
        attributes = parse_attributes(
            opening_tag,
            diagnostics=diagnostics,
            expression_marker=self.config.expression_marker,
            base_offset=base_offset + span.start,
        )

        inner_content = ""
        children: tuple[ComponentRecord, ...] = ()

        if not span.self_closing:
            raw_inner = span.inner_text(text)
            inner_content = raw_inner.strip()

            if inner_content and depth < max_depth:
                leading = len(raw_inner) - len(raw_inner.lstrip())
                inner_offset = base_offset + span.inner_start + leading
                children = tuple(
                    self._extract_level(
                        inner_content,
                        inner_offset,
                        depth + 1,
                        max_depth,
                        diagnostics,
                    )
                )
            elif inner_content and max_depth > 0:
                logger.debug(
                    f"Maximum depth {max_depth} reached at <{span.element_type}>; "
                    "keeping inner content as text"
                )

        return ComponentRecord(
            element_type=span.element_type,
            attributes=attributes,
            inner_content=inner_content,
            source_extent=(base_offset + span.start, base_offset + span.end),
            self_closing=span.self_closing,
            opening_tag=opening_tag,
            children=children,
        )
