"""Block types produced by the segmenter.

Blocks are the structural shells of a message. They hold raw line text; inline
tokenization happens later, per line, in the assembler.

All blocks are frozen dataclasses with slots. ``lineno`` records the 1-indexed
source line the block starts on and is excluded from equality, so two blocks
with the same content compare equal wherever they appear.

"""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, slots=True)
class HeadingBlock:
    """Single-line heading.

    Markdown: # Title, ## Title, ### Title

    """

    level: Literal[1, 2, 3]
    text: str
    lineno: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class ParagraphBlock:
    """Run of consecutive plain lines."""

    lines: tuple[str, ...]
    lineno: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Flat bullet list.

    Markdown: - item or * item

    """

    items: tuple[str, ...]
    lineno: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class BlockquoteBlock:
    """Flat block quote; lines have their ``>`` marker removed.

    Markdown: > quoted text

    """

    lines: tuple[str, ...]
    lineno: int = field(default=0, compare=False)


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block.

    ``code`` is the fence interior, byte-exact, lines joined with ``\\n``.

    """

    code: str
    language: str | None = None
    lineno: int = field(default=0, compare=False)


type Block = HeadingBlock | ParagraphBlock | ListBlock | BlockquoteBlock | CodeBlock


__all__ = [
    "Block",
    "BlockquoteBlock",
    "CodeBlock",
    "HeadingBlock",
    "ListBlock",
    "ParagraphBlock",
]
