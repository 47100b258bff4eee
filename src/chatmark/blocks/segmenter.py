"""Line-oriented block segmenter with O(n) guaranteed performance.

Single forward pass over ``content.split("\\n")``. Every line is classified
once on entry and once more at most when a running block checks whether it
continues; the cursor never moves backwards.

No regex in the hot path.

Thread Safety:
BlockSegmenter instances are single-use. Create one per content string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from chatmark.blocks.classifiers import (
    is_blank,
    is_block_boundary,
    match_fence,
    match_heading,
    match_list_item,
    match_quote,
)
from chatmark.blocks.types import (
    Block,
    BlockquoteBlock,
    CodeBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)
from chatmark.utils.logger import get_logger

logger = get_logger(__name__)


class BlockSegmenter:
    """Split message content into typed blocks.

    Usage:
        >>> BlockSegmenter("# Title\\n\\nSome text").segment()
        [HeadingBlock(level=1, text='Title', ...), ParagraphBlock(lines=('Some text',), ...)]

    Malformed structure never raises: anything that is not a recognized block
    opener degrades to paragraph text.

    """

    __slots__ = ("_lines", "_pos")

    def __init__(self, content: str) -> None:
        self._lines = content.split("\n")
        self._pos = 0

    def segment(self) -> list[Block]:
        """Run the pass and return blocks in source order."""
        blocks: list[Block] = []
        lines = self._lines
        total = len(lines)

        while self._pos < total:
            line = lines[self._pos]

            if is_blank(line):
                self._pos += 1
                continue

            fence = match_fence(line)
            if fence is not None:
                blocks.append(self._read_code_block(fence.language))
                continue

            heading = match_heading(line)
            if heading is not None:
                blocks.append(
                    HeadingBlock(
                        level=heading.level,  # type: ignore[arg-type]
                        text=heading.text,
                        lineno=self._pos + 1,
                    )
                )
                self._pos += 1
                continue

            if match_list_item(line) is not None:
                start = self._pos
                blocks.append(ListBlock(items=self._read_run(match_list_item), lineno=start + 1))
                continue

            if match_quote(line) is not None:
                start = self._pos
                blocks.append(BlockquoteBlock(lines=self._read_run(match_quote), lineno=start + 1))
                continue

            blocks.append(self._read_paragraph())

        return blocks

    def _read_code_block(self, language: str | None) -> CodeBlock:
        """Consume an opening fence, its interior and the closing fence if any."""
        lines = self._lines
        total = len(lines)
        start = self._pos
        self._pos += 1

        interior_start = self._pos
        while self._pos < total and match_fence(lines[self._pos]) is None:
            self._pos += 1
        code = "\n".join(lines[interior_start : self._pos])

        if self._pos < total:
            self._pos += 1  # closing fence
        else:
            logger.debug("Unterminated code fence opened at line %d", start + 1)

        return CodeBlock(code=code, language=language, lineno=start + 1)

    def _read_run(self, matcher: Callable[[str], str | None]) -> tuple[str, ...]:
        """Consume consecutive lines accepted by ``matcher``; collect its output."""
        lines = self._lines
        total = len(lines)
        collected: list[str] = []
        while self._pos < total:
            text = matcher(lines[self._pos])
            if text is None:
                break
            collected.append(text)
            self._pos += 1
        return tuple(collected)

    def _read_paragraph(self) -> ParagraphBlock:
        """Consume the current line and following non-blank, non-opener lines."""
        lines = self._lines
        total = len(lines)
        start = self._pos
        self._pos += 1
        while self._pos < total:
            line = lines[self._pos]
            if is_blank(line) or is_block_boundary(line):
                break
            self._pos += 1
        return ParagraphBlock(lines=tuple(lines[start : self._pos]), lineno=start + 1)


def segment(content: str) -> list[Block]:
    """Split raw message content into an ordered list of blocks.

    Args:
        content: Raw message text (any length, may be empty)

    Returns:
        Blocks in source order. Empty or whitespace-only content gives ``[]``.

    Example:
        >>> segment("- a\\n- b\\n- c")
        [ListBlock(items=('a', 'b', 'c'), ...)]

    """
    return BlockSegmenter(content).segment()


__all__ = [
    "BlockSegmenter",
    "segment",
]
