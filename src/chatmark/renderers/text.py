"""Plain-text renderer for notifications, previews and search indexing.

Mentions become ``@label``, emoji ``:name:``, links ``label (url)``. Structure
is kept with light markers so a preview still reads like the message.

Example:
    >>> from chatmark import parse
    >>> PlainTextRenderer().render(parse("# Hi\\n- <@1>"))
    'Hi\\n\\n- @User 1'
"""

from chatmark.errors import RenderError
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
    Paragraph,
    RoleMention,
    Text,
    UserMention,
)


class PlainTextRenderer:
    """Render a Document to plain text; blocks separated by a blank line."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        if not isinstance(node, Document):
            raise RenderError(type(self).__name__, node)
        return "\n\n".join(self._render_block(block) for block in node.children)

    def _render_block(self, block: DocumentBlock) -> str:
        match block:
            case Heading(children=children) | Paragraph(children=children):
                return self._render_inlines(children)
            case List(items=items):
                return "\n".join(f"- {self._render_inlines(item.children)}" for item in items)
            case Blockquote(children=children):
                return "\n".join(f"> {line}" for line in self._render_inlines(children).split("\n"))
            case FencedCode(code=code):
                return code
        raise RenderError(type(self).__name__, block)

    def _render_inlines(self, children: tuple[Inline, ...]) -> str:
        return "".join(self._render_inline(child) for child in children)

    def _render_inline(self, node: Inline) -> str:
        match node:
            case Text(content=content):
                return content
            case InlineCode(code=code):
                return code
            case Link(label=label, url=url):
                return f"{label} ({url})"
            case UserMention(label=label) | RoleMention(label=label):
                return f"@{label}"
            case Emoji(name=name):
                return f":{name}:"
            case LineBreak():
                return "\n"
        raise RenderError(type(self).__name__, node)


__all__ = [
    "PlainTextRenderer",
]
