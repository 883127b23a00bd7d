"""Assembly of converted SVG markup into presentable output.

This module wraps converted fragments either into a complete HTML preview
document (one card per component, with its JSX summary and attributes) or
into a condensed list of bare markup fragments.
"""

import json
from html import escape

from ..config.models import RenderConfig
from ..conversion.converter import MarkupConverter
from ..models import ComponentRecord, attribute_to_json

NO_COMPONENTS_MESSAGE = "No SVG components found in this file."
NO_COMPONENTS_COMMENT = "<!-- No SVG components found -->"

_STYLE = """\
    * { box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      margin: 0;
      padding: 20px;
      line-height: 1.6;
    }
    .header {
      border-bottom: 2px solid #d0d7de;
      padding-bottom: 20px;
      margin-bottom: 30px;
      text-align: center;
    }
    .header h1 { margin: 0 0 10px 0; font-size: 2rem; font-weight: 600; }
    .file-path { opacity: 0.8; font-size: 0.95rem; }
    .svg-component {
      margin-bottom: 40px;
      border: 1px solid #d0d7de;
      border-radius: 12px;
      overflow: hidden;
    }
    .component-header { padding: 15px 20px; border-bottom: 1px solid #d0d7de; }
    .component-header h3 { margin: 0; font-size: 1.1rem; font-weight: 500; }
    .svg-container {
      background-color: #ffffff;
      padding: 30px;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 150px;
    }
    .svg-container svg { max-width: 100%; height: auto; }
    .jsx-code pre, .props-info pre {
      margin: 10px 0 0 0;
      font-family: 'Monaco', 'Menlo', 'Ubuntu Mono', monospace;
      font-size: 13px;
      padding: 15px;
      border-radius: 6px;
      border: 1px solid #d0d7de;
      overflow-x: auto;
    }
    .jsx-code, .props-info { padding: 20px; border-top: 1px solid #d0d7de; }
    .no-components { text-align: center; padding: 60px 20px; font-size: 1.1rem; }
"""


class DocumentAssembler:
    """Builds preview documents from ``(record, markup)`` pairs."""

    def __init__(self, config: RenderConfig | None = None):
        """Initialize the assembler.

        Args:
            config: Render settings. Defaults to RenderConfig().
        """
        self.config = config or RenderConfig()

    def render(
        self, pairs: list[tuple[ComponentRecord, str]], display_id: str
    ) -> str:
        """Render according to ``config.condensed``."""
        if self.config.condensed:
            return "\n".join(self.render_condensed(pairs))
        return self.render_document(pairs, display_id)

    def render_condensed(self, pairs: list[tuple[ComponentRecord, str]]) -> list[str]:
        """Return the bare markup fragments, or a placeholder comment."""
        if not pairs:
            return [NO_COMPONENTS_COMMENT]
        return [markup for _record, markup in pairs]

    def render_document(
        self, pairs: list[tuple[ComponentRecord, str]], display_id: str
    ) -> str:
        """Render a complete HTML document.

        Args:
            pairs: Records paired with their converted markup.
            display_id: Human-readable identifier shown in the header.

        Returns:
            HTML document string.
        """
        title = escape(self.config.title)
        lines = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"  <title>{title}</title>",
            "  <style>",
            _STYLE.rstrip("\n"),
            "  </style>",
            "</head>",
            "<body>",
            '  <div class="header">',
            f"    <h1>{title}</h1>",
            f'    <div class="file-path">{escape(display_id)}</div>',
            "  </div>",
        ]

        if pairs:
            for record, markup in pairs:
                lines.extend(self._render_card(record, markup))
        else:
            lines.append(f'  <div class="no-components">{NO_COMPONENTS_MESSAGE}</div>')

        lines.extend(["</body>", "</html>"])
        return "\n".join(lines) + "\n"

    def _render_card(self, record: ComponentRecord, markup: str) -> list[str]:
        """Render one component card."""
        lines = [
            '  <div class="svg-component">',
            '    <div class="component-header">',
            f"      <h3>{escape(record.element_type)}</h3>",
            "    </div>",
            '    <div class="svg-container">',
            f"      {markup}",
            "    </div>",
        ]

        if self.config.include_jsx:
            lines.extend(
                [
                    '    <div class="jsx-code">',
                    "      <strong>JSX</strong>",
                    f"      <pre><code>{escape(record.jsx_summary())}</code></pre>",
                    "    </div>",
                ]
            )

        if self.config.include_attributes:
            attributes = {
                name: attribute_to_json(value)
                for name, value in record.attributes.items()
            }
            dump = json.dumps(attributes, indent=2, ensure_ascii=False)
            lines.extend(
                [
                    '    <div class="props-info">',
                    "      <strong>Props</strong>",
                    f"      <pre>{escape(dump)}</pre>",
                    "    </div>",
                ]
            )

        lines.append("  </div>")
        return lines


def render_fragment(
    record: ComponentRecord,
    converter: MarkupConverter | None = None,
    standalone: bool = True,
) -> str:
    """Render a single component as SVG markup.

    Args:
        record: Component to render.
        converter: Converter to use (default: MarkupConverter()).
        standalone: Wrap non-``svg`` elements in an ``<svg>`` root.

    Returns:
        SVG markup string.
    """
    converter = converter or MarkupConverter()
    if standalone:
        return converter.to_standalone(record)
    return converter.convert(record)
