"""End-to-end preview pipeline.

Wires extraction, conversion and document assembly together for callers
that just want a preview of a source text.
"""

from dataclasses import dataclass, field

from .config.models import PreviewConfig
from .conversion.converter import MarkupConverter
from .extraction.extractor import ComponentExtractor
from .models import ComponentRecord, ExtractionResult
from .rendering.assembler import DocumentAssembler


@dataclass
class PreviewOutput:
    """Everything produced for one source text."""

    result: ExtractionResult
    pairs: list[tuple[ComponentRecord, str]] = field(default_factory=list)
    document: str = ""

    @property
    def fragments(self) -> list[str]:
        return [markup for _record, markup in self.pairs]


class PreviewPipeline:
    """Extract -> convert -> assemble, configured from one PreviewConfig."""

    def __init__(self, config: PreviewConfig | None = None):
        self.config = config or PreviewConfig()
        self.extractor = ComponentExtractor(self.config.extraction)
        self.converter = MarkupConverter(self.config.conversion, self.extractor)
        self.assembler = DocumentAssembler(self.config.render)

    def run(self, source: str, display_id: str = "") -> PreviewOutput:
        """Produce records, converted markup and the rendered output.

        Document cards get standalone markup; condensed output gets the bare
        converted elements. Conversion fallbacks are appended to the result's
        diagnostics.
        """
        result = self.extractor.analyze(source, display_id)
        if self.config.render.condensed:
            convert = self.converter.convert
        else:
            convert = self.converter.to_standalone
        pairs = [
            (record, convert(record, diagnostics=result.diagnostics))
            for record in result.components
        ]
        document = self.assembler.render(pairs, display_id)
        return PreviewOutput(result=result, pairs=pairs, document=document)


def preview_source(
    source: str,
    display_id: str = "",
    config: PreviewConfig | None = None,
    condensed: bool | None = None,
) -> PreviewOutput:
    """Render a preview for one source text.

    Args:
        source: Source text containing JSX graphics markup.
        display_id: Identifier shown in the document header.
        config: Pipeline configuration (default: PreviewConfig()).
        condensed: Override ``config.render.condensed``.

    Returns:
        PreviewOutput with the extraction result, markup pairs and document.
    """
    config = config or PreviewConfig()
    if condensed is not None:
        config = config.model_copy(
            update={"render": config.render.model_copy(update={"condensed": condensed})}
        )
    return PreviewPipeline(config).run(source, display_id)
