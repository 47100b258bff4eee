"""Typed document nodes for chatmark.

All nodes are frozen dataclasses with slots for:
- Immutability: a Document can be shared across threads and re-renders
- Structural equality: identical inputs give equal Documents
- Pattern matching: ``match`` statements work naturally

Node Hierarchy:
Document
├── DocumentBlock
│   ├── Heading
│   ├── Paragraph
│   ├── List
│   │   └── ListItem
│   ├── Blockquote
│   └── FencedCode
└── Inline
    ├── Text
    ├── InlineCode
    ├── Link
    ├── UserMention
    ├── RoleMention
    ├── Emoji
    └── LineBreak

Each variant maps to exactly one presentation treatment. Renderers must not
re-interpret the text inside nodes.

"""

from dataclasses import dataclass
from typing import Literal

# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text, rendered verbatim.

    Also carries the original ``:shortcode:`` when a custom emoji is unknown.

    """

    content: str


@dataclass(frozen=True, slots=True)
class InlineCode:
    """Inline code.

    Markdown: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link:
    """External link. The label is plain text.

    Markdown: [label](https://example.com)

    """

    label: str
    url: str


@dataclass(frozen=True, slots=True)
class UserMention:
    """Resolved user mention.

    ``resolved`` is False when the label is the synthetic fallback.

    """

    user_id: str
    label: str
    resolved: bool = True


@dataclass(frozen=True, slots=True)
class RoleMention:
    """Resolved role mention.

    ``resolved`` is False when the label is the synthetic fallback.

    """

    role_id: str
    label: str
    resolved: bool = True


@dataclass(frozen=True, slots=True)
class Emoji:
    """Custom emoji found in the lookup tables.

    ``name`` is the emoji's canonical name; ``shortcode`` is what the author
    typed, which may differ in case.

    """

    emoji_id: str
    name: str
    url: str
    animated: bool = False
    shortcode: str = ""


@dataclass(frozen=True, slots=True)
class LineBreak:
    """Break between two source lines of a paragraph or quote."""


type Inline = Text | InlineCode | Link | UserMention | RoleMention | Emoji | LineBreak


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading:
    """Heading, levels 1 to 3."""

    level: Literal[1, 2, 3]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Paragraph; source lines separated by LineBreak."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem:
    """One bullet item."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class List:
    """Flat bullet list."""

    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class Blockquote:
    """Block quote; source lines separated by LineBreak."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class FencedCode:
    """Fenced code block. ``code`` is exact and never tokenized."""

    code: str
    language: str | None = None


type DocumentBlock = Heading | Paragraph | List | Blockquote | FencedCode


@dataclass(frozen=True, slots=True)
class Document:
    """Root node: blocks in source order."""

    children: tuple[DocumentBlock, ...]


type Node = Document | DocumentBlock | ListItem | Inline


__all__ = [
    "Blockquote",
    "Document",
    "DocumentBlock",
    "Emoji",
    "FencedCode",
    "Heading",
    "Inline",
    "InlineCode",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "RoleMention",
    "Text",
    "UserMention",
]
