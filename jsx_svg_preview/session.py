"""Preview session state.

A PreviewSession stands in for a host's preview panel: it remembers which
source is on display and the last rendered document, so the host can
refresh it when the source changes. Sessions are independent objects
passed to whatever display code needs them; nothing is kept globally.
"""

import time
from dataclasses import dataclass, field

from .config.models import PreviewConfig
from .pipeline import PreviewOutput, PreviewPipeline
from .preview_logging import get_logger, setup_logging

logger = get_logger("session")


@dataclass
class PreviewSession:
    """Tracks one open preview.

    Attributes:
        config: Pipeline configuration used for every render
        display_id: Identifier of the source currently shown
        is_open: Whether the preview is showing
        last_output: Output of the most recent render
        render_count: Number of renders since the session was opened
        updated_at: Timestamp of the most recent render

    Example:
        session = PreviewSession()
        document = session.show(source, "SampleSvg.tsx")
        session.update(edited_source, "SampleSvg.tsx")
        session.close()
    """

    config: PreviewConfig = field(default_factory=PreviewConfig)
    display_id: str | None = None
    is_open: bool = False
    last_output: PreviewOutput | None = None
    render_count: int = 0
    updated_at: float = 0.0

    def __post_init__(self) -> None:
        if self.config.logging.debug or self.config.logging.verbose:
            setup_logging(
                debug=self.config.logging.debug,
                verbose=self.config.logging.verbose,
            )
        self._pipeline = PreviewPipeline(self.config)

    @property
    def title(self) -> str:
        """Panel title for the current source."""
        name = (self.display_id or "").replace("\\", "/").rsplit("/", 1)[-1]
        return f"{self.config.render.title} - {name}" if name else self.config.render.title

    @property
    def document(self) -> str | None:
        return self.last_output.document if self.last_output else None

    def show(self, source: str, display_id: str) -> str:
        """Open (or retarget) the preview and render ``source``.

        Returns:
            The rendered document.
        """
        if not self.is_open:
            self.render_count = 0
        self.is_open = True
        return self._render(source, display_id)

    def update(self, source: str, display_id: str) -> str | None:
        """Re-render if the preview is open.

        Returns:
            The rendered document, or None when the session is closed.
        """
        if not self.is_open:
            logger.debug(f"Ignoring update for {display_id}: preview is closed")
            return None
        return self._render(source, display_id)

    def close(self) -> None:
        """Close the preview and drop rendered state."""
        self.is_open = False
        self.display_id = None
        self.last_output = None

    def _render(self, source: str, display_id: str) -> str:
        output = self._pipeline.run(source, display_id)
        self.display_id = display_id
        self.last_output = output
        self.render_count += 1
        self.updated_at = time.time()
        logger.debug(
            f"Rendered {output.result.component_count} component(s) for {display_id}"
        )
        return output.document
