"""Document assembly: blocks plus resolved inline content.

Each block shell from the segmenter is paired with the resolved inline nodes of
its text. Paragraph and blockquote lines are tokenized one by one and joined
with an explicit LineBreak, one per source line boundary. Code blocks are
carried over untouched.

Thread Safety:
    Pure function. The emoji index is built once per call and discarded.

"""

from __future__ import annotations

from collections.abc import Sequence

from chatmark.blocks.types import (
    Block,
    BlockquoteBlock,
    CodeBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)
from chatmark.config import get_render_config
from chatmark.inline.tokenizer import InlineTokenizer
from chatmark.lookups import EMPTY_LOOKUPS, EmojiIndex, LookupTables
from chatmark.nodes import (
    Blockquote,
    Document,
    DocumentBlock,
    FencedCode,
    Heading,
    Inline,
    LineBreak,
    List,
    ListItem,
    Paragraph,
)
from chatmark.resolver import Resolver, resolve_tokens

_LINE_BREAK = LineBreak()


class DocumentAssembler:
    """Assemble a Document from segmented blocks.

    Usage:
        >>> from chatmark.blocks import segment
        >>> DocumentAssembler(LookupTables()).assemble(segment("hi\\nthere"))
        Document(children=(Paragraph(children=(Text(content='hi'), LineBreak(),
        Text(content='there'))),))

    """

    __slots__ = ("_lookups", "_resolver", "_emoji_index", "_link_schemes")

    def __init__(self, lookups: LookupTables, resolver: Resolver | None = None) -> None:
        self._lookups = lookups
        self._resolver: Resolver = resolver or resolve_tokens
        self._emoji_index: EmojiIndex = lookups.emoji_index()
        self._link_schemes = get_render_config().link_schemes

    def assemble(self, blocks: Sequence[Block]) -> Document:
        return Document(children=tuple(self._assemble_block(block) for block in blocks))

    def _assemble_block(self, block: Block) -> DocumentBlock:
        match block:
            case HeadingBlock(level=level, text=text):
                return Heading(level=level, children=self._inline(text))
            case ParagraphBlock(lines=lines):
                return Paragraph(children=self._inline_lines(lines))
            case ListBlock(items=items):
                return List(items=tuple(ListItem(children=self._inline(item)) for item in items))
            case BlockquoteBlock(lines=lines):
                return Blockquote(children=self._inline_lines(lines))
            case CodeBlock(code=code, language=language):
                return FencedCode(code=code, language=language)
        msg = f"Cannot assemble {type(block).__name__}: {block!r}"
        raise TypeError(msg)

    def _inline(self, line: str) -> tuple[Inline, ...]:
        tokens = InlineTokenizer(line, link_schemes=self._link_schemes).tokenize()
        return self._resolver(tokens, self._lookups, emoji_index=self._emoji_index)

    def _inline_lines(self, lines: Sequence[str]) -> tuple[Inline, ...]:
        children: list[Inline] = []
        for index, line in enumerate(lines):
            if index:
                children.append(_LINE_BREAK)
            children.extend(self._inline(line))
        return tuple(children)


def assemble(
    blocks: Sequence[Block],
    lookups: LookupTables | None = None,
    *,
    resolver: Resolver | None = None,
) -> Document:
    """Combine blocks with their resolved inline content.

    Args:
        blocks: Segmenter output
        lookups: Lookup table snapshot (empty tables when None)
        resolver: Replacement for the default resolver

    Returns:
        Document with one node per block, in the same order.

    Raises:
        TypeError: An element of ``blocks`` is not a segmenter block.

    """
    return DocumentAssembler(lookups or EMPTY_LOOKUPS, resolver).assemble(blocks)


__all__ = [
    "DocumentAssembler",
    "assemble",
]
