"""
chatmark: chat message markup for Python

Turns raw chat text into a typed, renderer-agnostic Document: headings, lists,
quotes, fenced code, inline code, links, user/role mentions and custom emoji.
The pipeline is pure, deterministic, never raises on message content, and runs
in O(n).

Quick Start:
    >>> from chatmark import LookupTables, parse, render
    >>> doc = parse("# Hi <@123>", LookupTables(users={"123": "ada"}))
    >>> render(doc)
    '<h1>Hi <span class="mention" data-user-id="123">@ada</span></h1>\\n'

    >>> # Or use the high-level Chatmark class
    >>> from chatmark import Chatmark, RenderConfig
    >>> cm = Chatmark(config=RenderConfig(user_fallback_template="@unknown"))
    >>> html = cm("hello <@42>")

Pipeline:
    content -> segment() -> tokenize() per line -> resolve_tokens() -> assemble()

Installation:
    pip install chatmark             # zero runtime dependencies
"""

from collections.abc import Iterable

from chatmark.assembler import DocumentAssembler, assemble
from chatmark.blocks import (
    Block,
    BlockquoteBlock,
    BlockSegmenter,
    CodeBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    segment,
)
from chatmark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from chatmark.errors import ChatmarkError, ConfigError, RenderError, SerializationError
from chatmark.inline import (
    CodeSpanToken,
    EmojiToken,
    InlineToken,
    InlineTokenizer,
    LinkToken,
    RoleMentionToken,
    TextToken,
    UserMentionToken,
    tokenize,
    tokenize_lines,
)
from chatmark.lookups import EMPTY_LOOKUPS, CustomEmoji, EmojiIndex, LookupTables
from chatmark.nodes import (
    Blockquote,
    Document,
    DocumentBlock,
    Emoji,
    FencedCode,
    Heading,
    Inline,
    InlineCode,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    RoleMention,
    Text,
    UserMention,
)
from chatmark.references import References, collect_references
from chatmark.renderers import HtmlRenderer, PlainTextRenderer, Renderer
from chatmark.resolver import Resolver, resolve_tokens, role_label, user_label
from chatmark.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    content: str,
    lookups: LookupTables | None = None,
    *,
    resolver: Resolver | None = None,
) -> Document:
    """Parse message content into a Document.

    Args:
        content: Raw message text
        lookups: User/role/emoji snapshot (empty tables if None)
        resolver: Replacement for the default reference resolver

    Returns:
        Document with resolved inline content. Recomputed on every call.

    Example:
        >>> parse("- a\\n- b").children[0]
        List(items=(ListItem(children=(Text(content='a'),)), ListItem(children=(Text(content='b'),))))

    """
    return DocumentAssembler(lookups or EMPTY_LOOKUPS, resolver).assemble(segment(content))


def render(doc: Document) -> str:
    """Render a Document to HTML."""
    return HtmlRenderer().render(doc)


def render_text(doc: Document) -> str:
    """Render a Document to plain text."""
    return PlainTextRenderer().render(doc)


class Chatmark:
    """High-level processor combining the pipeline and a renderer.

    Usage:
        >>> cm = Chatmark()
        >>> cm("**not bold** <@1>")
        '<p>**not bold** <span class="mention" data-user-id="1">@User 1</span></p>\\n'

        >>> # Access the Document
        >>> doc = cm.parse("# Heading")
        >>> doc.children[0].level
        1

    Thread Safety:
        Config is set via ContextVar (thread-local) for the duration of each
        call. Safe to use multiple Chatmark instances concurrently.

    """

    __slots__ = ("_config", "_resolver", "_renderer")

    def __init__(
        self,
        *,
        config: RenderConfig | None = None,
        resolver: Resolver | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            config: Render configuration (defaults to RenderConfig())
            resolver: Replacement for the default reference resolver
            renderer: Renderer used by ``__call__`` and ``render`` (HTML by default)
        """
        self._config = config or RenderConfig()
        self._resolver = resolver
        self._renderer: Renderer = renderer or HtmlRenderer()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, content: str, lookups: LookupTables | None = None) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(content, lookups))

    def parse(self, content: str, lookups: LookupTables | None = None) -> Document:
        """Parse content with this processor's config and resolver."""
        with render_config_context(self._config):
            return parse(content, lookups, resolver=self._resolver)

    def parse_many(
        self,
        contents: Iterable[str],
        lookups: LookupTables | None = None,
    ) -> list[Document]:
        """Parse a batch of messages against one lookup snapshot.

        Sets config once for the whole batch. The emoji index is still built
        per message so every Document is computed independently.
        """
        with render_config_context(self._config):
            return [parse(content, lookups, resolver=self._resolver) for content in contents]

    def render(self, doc: Document) -> str:
        """Render a Document with this processor's renderer."""
        return self._renderer.render(doc)

    def references(self, content: str) -> References:
        """Collect the user ids, role ids and emoji a message references."""
        with render_config_context(self._config):
            return collect_references(content)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_text",
    "collect_references",
    "References",
    # High-level
    "Chatmark",
    # Pipeline stages
    "segment",
    "tokenize",
    "tokenize_lines",
    "resolve_tokens",
    "assemble",
    "BlockSegmenter",
    "InlineTokenizer",
    "DocumentAssembler",
    "Resolver",
    "user_label",
    "role_label",
    # Blocks
    "Block",
    "HeadingBlock",
    "ParagraphBlock",
    "ListBlock",
    "BlockquoteBlock",
    "CodeBlock",
    # Inline tokens
    "InlineToken",
    "TextToken",
    "CodeSpanToken",
    "LinkToken",
    "UserMentionToken",
    "RoleMentionToken",
    "EmojiToken",
    # Document nodes
    "Document",
    "DocumentBlock",
    "Heading",
    "Paragraph",
    "List",
    "ListItem",
    "Blockquote",
    "FencedCode",
    "Inline",
    "Text",
    "InlineCode",
    "Link",
    "UserMention",
    "RoleMention",
    "Emoji",
    "LineBreak",
    # Lookups
    "LookupTables",
    "CustomEmoji",
    "EmojiIndex",
    "EMPTY_LOOKUPS",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Renderers
    "HtmlRenderer",
    "PlainTextRenderer",
    "Renderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "ChatmarkError",
    "ConfigError",
    "RenderError",
    "SerializationError",
]
