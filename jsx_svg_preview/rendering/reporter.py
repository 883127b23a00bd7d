"""Output reporters for extraction results.

This module provides formatters for summarising extraction results as
plain text (for terminal or side-panel display) or JSON (for tooling).
"""

import json
import sys
from typing import Any, TextIO

from ..conversion.converter import format_attribute_value
from ..models import ComponentRecord, DiagnosticKind, ExtractionResult


class TextReporter:
    """Line-oriented reporter with optional color.

    Example output:
        Svg width=120 height=80
          Rect x=10 y=10 fill=#FF6B6B
        [unterminated_element] @42 <Path> has an unterminated opening tag

        2 component(s) in 1ms (1 skipped)
    """

    COLORS = {
        DiagnosticKind.PARSE_SKIP: "\033[1;33m",  # Yellow
        DiagnosticKind.UNTERMINATED_ELEMENT: "\033[1;33m",  # Yellow
        DiagnosticKind.CONVERSION_FALLBACK: "\033[0;34m",  # Blue
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def __init__(
        self,
        stream: TextIO = sys.stderr,
        use_color: bool | None = None,
        show_diagnostics: bool = True,
    ):
        """Initialize the text reporter.

        Args:
            stream: Output stream (default: stderr).
            use_color: Whether to use ANSI colors. Auto-detects if None.
            show_diagnostics: Whether to list skipped fragments.
        """
        self.stream = stream
        self.show_diagnostics = show_diagnostics
        if use_color is None:
            self.use_color = hasattr(stream, "isatty") and stream.isatty()
        else:
            self.use_color = use_color

    def report(self, result: ExtractionResult) -> None:
        """Output one line per component, diagnostics, then a summary."""
        # Recursive results list descendants too; print each once, as a tree
        nested = {
            id(descendant)
            for component in result.components
            for descendant in component.iter_tree()
            if descendant is not component
        }
        for component in result.components:
            if id(component) not in nested:
                self._report_component(component, 0)

        if self.show_diagnostics:
            for diagnostic in result.diagnostics:
                color = self.COLORS.get(diagnostic.kind, "") if self.use_color else ""
                reset = self.RESET if self.use_color else ""
                location = f" @{diagnostic.offset}" if diagnostic.offset is not None else ""
                print(
                    f"{color}[{diagnostic.kind.value}]{reset}{location} {diagnostic.message}",
                    file=self.stream,
                )

        self._print_summary(result)

    def _report_component(self, component: ComponentRecord, depth: int) -> None:
        indent = "  " * depth
        attributes = " ".join(
            f"{name}={format_attribute_value(value)}"
            for name, value in component.attributes.items()
        )
        line = f"{indent}{component.element_type}"
        if attributes:
            if self.use_color:
                line += f" {self.DIM}{attributes}{self.RESET}"
            else:
                line += f" {attributes}"
        print(line, file=self.stream)

        for child in component.children:
            self._report_component(child, depth + 1)

    def _print_summary(self, result: ExtractionResult) -> None:
        time_ms = result.extraction_time_ms

        if not result.has_components:
            summary = f"\nNo SVG components found ({time_ms:.0f}ms)"
        else:
            summary = f"\n{result.component_count} component(s) in {time_ms:.0f}ms"

        if result.skip_count > 0:
            summary += f" ({result.skip_count} skipped)"

        print(summary, file=self.stream)


class JSONReporter:
    """JSON reporter for tooling consumption.

    Output format:
    {
        "display_id": str,
        "components": [...],
        "diagnostics": [...],
        "extraction_time_ms": float,
        "component_count": int,
        "counts": {"skipped": int, "fallbacks": int}
    }
    """

    def __init__(self, stream: TextIO = sys.stdout):
        """Initialize the JSON reporter.

        Args:
            stream: Output stream (default: stdout).
        """
        self.stream = stream

    def report(self, result: ExtractionResult) -> dict[str, Any]:
        """Output the result as JSON.

        Returns:
            The output dictionary (also written to stream).
        """
        output = result.to_dict()
        output["counts"] = {
            "skipped": result.skip_count,
            "fallbacks": sum(
                1
                for d in result.diagnostics
                if d.kind == DiagnosticKind.CONVERSION_FALLBACK
            ),
        }

        json.dump(output, self.stream)
        return output
