"""Element matching for JSX graphics markup.

The matcher walks source text once, left to right, and reports every
top-level occurrence of a vocabulary element together with its extent.
Opening and closing tags are paired with a stack, so nested elements of the
same name (``<G><G></G></G>``) resolve to the correct partner.

Elements nested inside a matched span are not reported separately; callers
that want the tree re-run the matcher over the inner content.
"""

import re
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..models import SVG_VOCABULARY, Diagnostic, DiagnosticKind
from ..preview_logging import get_logger
from .attributes import scan_braced, scan_quoted

logger = get_logger("extraction")

OPEN_TAG_PATTERN = re.compile(r"<([A-Za-z_$][\w$.]*)")
CLOSE_TAG_PATTERN = re.compile(r"</\s*([A-Za-z_$][\w$.]*)\s*>")
BOUNDARY_TAG_PATTERN = re.compile(r"</?\s*([A-Za-z_$][\w$.]*)")


@dataclass(frozen=True)
class ElementSpan:
    """Location of one matched element in the scanned text.

    Attributes:
        element_type: Vocabulary element name
        start: Offset of the opening ``<``
        end: Offset just past the element (after ``/>`` or the closing tag)
        tag_end: Offset just past the opening tag
        inner_start: Start of raw inner content (== tag_end)
        inner_end: Start of the closing tag (== end for self-closing)
        self_closing: Whether the element used the ``/>`` form
    """

    element_type: str
    start: int
    end: int
    tag_end: int
    inner_start: int
    inner_end: int
    self_closing: bool

    def opening_tag(self, text: str) -> str:
        return text[self.start : self.tag_end]

    def inner_text(self, text: str) -> str:
        return text[self.inner_start : self.inner_end]

    def full_text(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass
class _OpenFrame:
    """An opening tag still waiting for its closing tag."""

    name: str
    start: int
    tag_end: int
    # Completed spans directly inside this frame, plus the nested lists of
    # abandoned child frames. They only become top-level if this frame
    # turns out to be unterminated.
    nested: list = field(default_factory=list)


def _flatten(items: list) -> list[ElementSpan]:
    """Flatten spans promoted out of abandoned frames."""
    spans: list[ElementSpan] = []
    pending = [iter(items)]
    while pending:
        for item in pending[-1]:
            if isinstance(item, list):
                pending.append(iter(item))
                break
            spans.append(item)
        else:
            pending.pop()
    return spans


class ElementMatcher:
    """Finds vocabulary elements in source text with a single linear scan."""

    def __init__(self, vocabulary: Iterable[str] | None = None):
        """Initialize the matcher.

        Args:
            vocabulary: Element names to recognise. Defaults to the
                built-in graphics vocabulary.
        """
        self.vocabulary = (
            frozenset(vocabulary) if vocabulary is not None else SVG_VOCABULARY
        )

    def match(self, text: str) -> list[tuple[str, str]]:
        """Return ``(element_type, span_text)`` for each top-level element."""
        return [(span.element_type, span.full_text(text)) for span in self.iter_spans(text)]

    def iter_spans(
        self,
        text: str,
        diagnostics: list[Diagnostic] | None = None,
        base_offset: int = 0,
    ) -> Iterator[ElementSpan]:
        """Iterate over top-level spans in start order.

        Same arguments as :meth:`find_spans`. Diagnostics are complete once
        the iterator is exhausted.
        """
        yield from self.find_spans(text, diagnostics, base_offset)

    def find_spans(
        self,
        text: str,
        diagnostics: list[Diagnostic] | None = None,
        base_offset: int = 0,
    ) -> list[ElementSpan]:
        """Find all top-level vocabulary elements.

        Args:
            text: Text to scan.
            diagnostics: Optional list receiving UNTERMINATED_ELEMENT entries.
            base_offset: Offset of ``text`` within the original source,
                used only for diagnostic positions.

        Returns:
            Spans ordered by start offset. Offsets are relative to ``text``.
        """
        top_level: list = []
        stack: list[_OpenFrame] = []
        open_names: Counter[str] = Counter()
        boundaries = self._tag_boundaries(text)

        def report(frame_name: str, offset: int, reason: str) -> None:
            logger.debug(f"Skipping <{frame_name}> at {base_offset + offset}: {reason}")
            if diagnostics is not None:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.UNTERMINATED_ELEMENT,
                        message=f"<{frame_name}> {reason}",
                        offset=base_offset + offset,
                    )
                )

        def complete(span: ElementSpan) -> None:
            if stack:
                stack[-1].nested.append(span)
            else:
                top_level.append(span)

        def pop() -> _OpenFrame:
            frame = stack.pop()
            open_names[frame.name] -= 1
            return frame

        def abandon(frame: _OpenFrame, reason: str) -> None:
            # Children of an unterminated element move up one level
            report(frame.name, frame.start, reason)
            if frame.nested:
                (stack[-1].nested if stack else top_level).append(frame.nested)

        pos = 0
        length = len(text)

        while True:
            pos = text.find("<", pos)
            if pos == -1 or pos >= length:
                break

            if text.startswith("</", pos):
                close_match = CLOSE_TAG_PATTERN.match(text, pos)
                if close_match is None:
                    pos += 2
                    continue
                name = close_match.group(1)
                if name in self.vocabulary and open_names[name] > 0:
                    while stack[-1].name != name:
                        abandon(pop(), f"is not closed before </{name}>")
                    frame = pop()
                    complete(
                        ElementSpan(
                            element_type=name,
                            start=frame.start,
                            end=close_match.end(),
                            tag_end=frame.tag_end,
                            inner_start=frame.tag_end,
                            inner_end=pos,
                            self_closing=False,
                        )
                    )
                pos = close_match.end()
                continue

            open_match = OPEN_TAG_PATTERN.match(text, pos)
            if open_match is None or open_match.group(1) not in self.vocabulary:
                pos += 1
                continue

            name = open_match.group(1)
            tag_end, self_closing, resume = self._scan_opening_tag(
                text, open_match.end(), boundaries
            )
            if tag_end is None:
                report(name, pos, "has an unterminated opening tag")
                pos = resume
                continue

            if self_closing:
                complete(
                    ElementSpan(
                        element_type=name,
                        start=pos,
                        end=tag_end,
                        tag_end=tag_end,
                        inner_start=tag_end,
                        inner_end=tag_end,
                        self_closing=True,
                    )
                )
            else:
                stack.append(_OpenFrame(name=name, start=pos, tag_end=tag_end))
                open_names[name] += 1
            pos = tag_end

        # Whatever is still open never found its closing tag
        while stack:
            abandon(pop(), "has no closing tag")

        spans = _flatten(top_level)
        spans.sort(key=lambda span: span.start)
        return spans

    def _tag_boundaries(self, text: str) -> list[int]:
        """Offsets of every vocabulary opening or closing tag in ``text``."""
        return [
            m.start()
            for m in BOUNDARY_TAG_PATTERN.finditer(text)
            if m.group(1) in self.vocabulary
        ]

    def _scan_opening_tag(
        self, text: str, pos: int, boundaries: list[int]
    ) -> tuple[int | None, bool, int]:
        """Find the end of an opening tag whose name ends at ``pos``.

        Quoted strings and brace expressions are skipped as units, so a
        ``>`` inside ``{() => x}`` does not end the tag. A bare ``<`` means
        the tag was never closed. Brace expressions may not run into the
        next vocabulary tag, which keeps unbalanced ``{`` from swallowing
        the rest of the text.

        Returns:
            ``(tag_end, self_closing, resume)``. ``tag_end`` is None when the
            tag is unterminated; scanning should then resume at ``resume``.
        """
        length = len(text)
        i = pos

        while i < length:
            ch = text[i]
            if ch == ">":
                return i + 1, False, i + 1
            if ch == "/" and text.startswith("/>", i):
                return i + 2, True, i + 2
            if ch == "<":
                return None, False, i
            if ch in ("'", '"'):
                end = scan_quoted(text, i)
                if end is None:
                    return None, False, pos
                i = end
                continue
            if ch == "{":
                next_tag = bisect_right(boundaries, i)
                limit = boundaries[next_tag] if next_tag < len(boundaries) else length
                end = scan_braced(text, i, limit)
                if end is None:
                    return None, False, pos
                i = end
                continue
            i += 1

        return None, False, pos
