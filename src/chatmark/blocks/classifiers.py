"""Line classifiers for the block segmenter.

Each classifier looks at one raw line (no trailing newline) and either returns
the parts the segmenter needs or None. Classifiers are anchored at column 0:
leading indentation disables every block marker.

Precedence when several could match is decided by the segmenter:
fence > heading > list > quote > paragraph.
"""

import string
from typing import NamedTuple

FENCE_MARKER = "```"

MAX_HEADING_LEVEL = 3

# Characters allowed in a fence language tag
LANGUAGE_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_-")

LIST_MARKERS: frozenset[str] = frozenset("-*")

QUOTE_MARKER = ">"


class FenceMarker(NamedTuple):
    """A recognized fence line."""

    language: str | None


class HeadingMarker(NamedTuple):
    """A recognized heading line."""

    level: int
    text: str


def is_blank(line: str) -> bool:
    """Whitespace-only (or empty) line."""
    return not line.strip()


def match_fence(line: str) -> FenceMarker | None:
    """Classify a line as a code fence.

    A fence is three backticks, an optional language tag of ASCII letters,
    digits, ``_`` or ``-``, then optional trailing whitespace. Anything else
    after the backticks (a fourth backtick, a space then more text) means the
    line is not a fence.

    Returns:
        FenceMarker with the tag (None when absent), or None.
    """
    if not line.startswith(FENCE_MARKER):
        return None

    pos = len(FENCE_MARKER)
    end = len(line)
    while pos < end and line[pos] in LANGUAGE_CHARS:
        pos += 1

    if line[pos:].strip():
        return None

    return FenceMarker(line[len(FENCE_MARKER) : pos] or None)


def _text_after_separator(line: str, start: int) -> str | None:
    """Text following a run of at least one whitespace character at ``start``.

    The separator is greedy but leaves one character of text when the rest of
    the line is whitespace, so ``"#   "`` has the text ``" "`` and ``"# "``
    has none.
    """
    end = len(line)
    pos = start
    while pos < end and line[pos].isspace():
        pos += 1
    pos = min(pos, end - 1)
    if pos <= start:
        return None
    return line[pos:]


def match_heading(line: str) -> HeadingMarker | None:
    """Classify a line as a heading.

    One to three ``#``, at least one whitespace character, then text. Longer
    marker runs and markers not followed by whitespace are not headings.
    Whitespace counts as text: ``"#   "`` is a heading whose text is ``" "``.
    """
    end = len(line)
    level = 0
    while level < end and line[level] == "#":
        level += 1
        if level > MAX_HEADING_LEVEL:
            return None

    if level == 0:
        return None

    text = _text_after_separator(line, level)
    if text is None:
        return None
    return HeadingMarker(level, text)


def match_list_item(line: str) -> str | None:
    """Classify a line as a bullet item; returns the item text.

    ``-`` or ``*``, at least one whitespace character, then text. As with
    headings, ``"-  "`` is an item whose text is ``" "``.
    """
    if not line or line[0] not in LIST_MARKERS:
        return None
    return _text_after_separator(line, 1)


def match_quote(line: str) -> str | None:
    """Classify a line as a quote line; returns the quoted text.

    ``>`` then an optional single whitespace character. The remainder may be
    empty (a bare ``>`` is an empty quote line).
    """
    if not line.startswith(QUOTE_MARKER):
        return None
    if len(line) > 1 and line[1].isspace():
        return line[2:]
    return line[1:]


def is_block_boundary(line: str) -> bool:
    """True if the line would open a non-paragraph block."""
    return (
        match_fence(line) is not None
        or match_heading(line) is not None
        or match_list_item(line) is not None
        or match_quote(line) is not None
    )


__all__ = [
    "FENCE_MARKER",
    "FenceMarker",
    "HeadingMarker",
    "is_blank",
    "is_block_boundary",
    "match_fence",
    "match_heading",
    "match_list_item",
    "match_quote",
]
