"""Block segmentation.

Turns raw message text into an ordered list of typed blocks:

- HeadingBlock: ``#`` to ``###`` headings
- ParagraphBlock: runs of plain lines
- ListBlock: flat ``-`` / ``*`` bullet lists
- BlockquoteBlock: flat ``>`` quotes
- CodeBlock: fenced code, never inline-tokenized
"""

from chatmark.blocks.segmenter import BlockSegmenter, segment
from chatmark.blocks.types import (
    Block,
    BlockquoteBlock,
    CodeBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)

__all__ = [
    "Block",
    "BlockSegmenter",
    "BlockquoteBlock",
    "CodeBlock",
    "HeadingBlock",
    "ListBlock",
    "ParagraphBlock",
    "segment",
]
