"""Attribute parsing for JSX opening tags.

Turns the raw text of an opening tag such as
``<Circle cx="50" fill={color} hidden />`` into an ordered mapping of
attribute name to typed value. Parsing is forgiving: fragments that cannot
be understood are skipped and reported, never raised.
"""

import math
import re

from ..models import (
    DEFAULT_EXPRESSION_MARKER,
    AttributeValue,
    Diagnostic,
    DiagnosticKind,
    Expression,
)

# Attribute names: word characters, optionally continued with -, : or .
# segments (aria-label, xlink:href).
ATTRIBUTE_NAME_PATTERN = re.compile(r"\w+(?:[-:.]\w+)*")

# Signed decimal with optional fractional part. No exponent, no hex.
NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

TAG_NAME_PATTERN = re.compile(r"<\s*([A-Za-z_$][\w$.]*)")

_QUOTES = ("'", '"', "`")


def scan_quoted(text: str, pos: int) -> int | None:
    """Find the end of a quoted string starting at ``pos``.

    JSX attribute strings have no escape sequences, so the value ends at
    the next matching quote.

    Returns:
        Index just past the closing quote, or None if unterminated.
    """
    quote = text[pos]
    end = text.find(quote, pos + 1)
    if end == -1:
        return None
    return end + 1


def scan_braced(text: str, pos: int, limit: int | None = None) -> int | None:
    """Find the end of a brace-delimited expression starting at ``pos``.

    Tracks brace depth and skips over JavaScript string and template
    literals so that braces inside them do not count.

    Args:
        text: Text to scan.
        pos: Offset of the opening ``{``.
        limit: Offset the expression may not reach (default: end of text).

    Returns:
        Index just past the matching ``}``, or None if unbalanced.
    """
    depth = 0
    i = pos
    length = len(text) if limit is None else min(limit, len(text))

    while i < length:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_js_string(text, i, length)
            if i is None:
                return None
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1

    return None


def _skip_js_string(text: str, pos: int, length: int) -> int | None:
    """Skip a JavaScript string literal, honouring backslash escapes."""
    quote = text[pos]
    i = pos + 1

    while i < length:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            # Unterminated single-line literal; resume after the newline
            return i + 1
        i += 1

    return None


def coerce_literal(raw: str) -> int | float | str:
    """Convert a quoted attribute value to a number when it looks like one.

    Raises:
        ValueError: If the value is numeric but has no finite int or float
            form (too many digits, or a float that overflows).
    """
    stripped = raw.strip()
    if stripped and NUMERIC_PATTERN.fullmatch(stripped):
        if "." in stripped:
            value = float(stripped)
            if not math.isfinite(value):
                raise ValueError(f"{stripped[:20]}... overflows a float")
            return value
        return int(stripped)
    return raw


def parse_attributes(
    tag_text: str,
    diagnostics: list[Diagnostic] | None = None,
    expression_marker: str = DEFAULT_EXPRESSION_MARKER,
    base_offset: int = 0,
) -> dict[str, AttributeValue]:
    """Parse the attributes of a single opening tag.

    Args:
        tag_text: Opening tag text, starting with ``<Name``. A trailing
            ``>`` or ``/>`` is optional.
        diagnostics: Optional list receiving PARSE_SKIP diagnostics.
        expression_marker: Placeholder text for brace expressions.
        base_offset: Offset of ``tag_text`` in the full source, used for
            diagnostic positions.

    Returns:
        Dictionary of attribute name -> value, in source order.
    """
    attributes: dict[str, AttributeValue] = {}

    def skip(start: int, message: str) -> None:
        if diagnostics is not None:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.PARSE_SKIP,
                    message=message,
                    offset=base_offset + start,
                )
            )

    name_match = TAG_NAME_PATTERN.match(tag_text)
    pos = name_match.end() if name_match else 0
    length = len(tag_text)

    while pos < length:
        ch = tag_text[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch == ">" or tag_text.startswith("/>", pos):
            break

        if ch == "{":
            # Spread attributes ({...props}) and stray expressions
            end = scan_braced(tag_text, pos)
            if end is None:
                skip(pos, "Unbalanced expression in attribute list")
                break
            skip(pos, f"Unsupported attribute fragment {tag_text[pos:end]!r}")
            pos = end
            continue

        name_match = ATTRIBUTE_NAME_PATTERN.match(tag_text, pos)
        if name_match is None:
            skip(pos, f"Unexpected character {ch!r} in attribute list")
            pos += 1
            continue

        name = name_match.group(0)
        pos = name_match.end()

        # Look past whitespace for "="
        lookahead = pos
        while lookahead < length and tag_text[lookahead].isspace():
            lookahead += 1

        if lookahead >= length or tag_text[lookahead] != "=":
            attributes[name] = True
            continue

        pos = lookahead + 1
        while pos < length and tag_text[pos].isspace():
            pos += 1

        if pos >= length:
            skip(lookahead, f"Attribute {name!r} has no value")
            break

        ch = tag_text[pos]
        if ch in ("'", '"'):
            end = scan_quoted(tag_text, pos)
            if end is None:
                skip(pos, f"Unterminated string for attribute {name!r}")
                break
            raw = tag_text[pos + 1 : end - 1]
            try:
                attributes[name] = coerce_literal(raw)
            except ValueError:
                skip(pos, f"Numeric value for attribute {name!r} is out of range, kept as text")
                attributes[name] = raw
            pos = end
        elif ch == "{":
            end = scan_braced(tag_text, pos)
            if end is None:
                skip(pos, f"Unbalanced expression for attribute {name!r}")
                break
            attributes[name] = Expression(
                source=tag_text[pos + 1 : end - 1].strip(),
                marker=expression_marker,
            )
            pos = end
        else:
            # Unquoted value (name=value) is not valid JSX
            end = pos
            while (
                end < length
                and not tag_text[end].isspace()
                and tag_text[end] != ">"
                and not tag_text.startswith("/>", end)
            ):
                end += 1
            skip(pos, f"Unquoted value for attribute {name!r}")
            pos = end

    return attributes
