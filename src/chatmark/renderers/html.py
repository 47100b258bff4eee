"""HTML renderer.

Renders a Document to unstyled HTML, one element per node variant. Styling
belongs to the embedding application; nodes carry class names and data
attributes to hook into.

Thread Safety:
HtmlRenderer holds no per-render state. A single instance can be shared
across threads and called concurrently.
"""

import html
import logging

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

logger = logging.getLogger(__name__)


def html_escape(s: str) -> str:
    """Escape HTML special characters (<, >, &, ") for text and attributes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from chatmark import parse
        >>> HtmlRenderer().render(parse("# Hi <@1>"))
        '<h1>Hi <span class="mention" data-user-id="1">@User 1</span></h1>\\n'

    """

    __slots__ = ("_link_target",)

    def __init__(self, *, link_target: str | None = "_blank") -> None:
        """Initialize renderer.

        Args:
            link_target: ``target`` attribute for links; None omits it along
                with the ``rel`` attribute
        """
        self._link_target = link_target

    def render(self, node: Document) -> str:
        """Render document to an HTML string, one block per line."""
        if not isinstance(node, Document):
            raise RenderError(type(self).__name__, node)
        parts: list[str] = []
        for block in node.children:
            self._render_block(block, parts)
        return "".join(parts)

    def _render_block(self, block: DocumentBlock, parts: list[str]) -> None:
        match block:
            case Heading(level=level, children=children):
                parts.append(f"<h{level}>")
                self._render_inlines(children, parts)
                parts.append(f"</h{level}>\n")
            case Paragraph(children=children):
                parts.append("<p>")
                self._render_inlines(children, parts)
                parts.append("</p>\n")
            case List(items=items):
                parts.append("<ul>\n")
                for item in items:
                    parts.append("<li>")
                    self._render_inlines(item.children, parts)
                    parts.append("</li>\n")
                parts.append("</ul>\n")
            case Blockquote(children=children):
                parts.append("<blockquote>")
                self._render_inlines(children, parts)
                parts.append("</blockquote>\n")
            case FencedCode(code=code, language=language):
                if language:
                    parts.append(f'<pre><code data-language="{html_escape(language)}">')
                else:
                    parts.append("<pre><code>")
                parts.append(html_escape(code))
                parts.append("</code></pre>\n")
            case _:
                logger.debug("Cannot render block %r", block)
                raise RenderError(type(self).__name__, block)

    def _render_inlines(self, children: tuple[Inline, ...], parts: list[str]) -> None:
        for child in children:
            self._render_inline(child, parts)

    def _render_inline(self, node: Inline, parts: list[str]) -> None:
        match node:
            case Text(content=content):
                parts.append(html_escape(content))
            case InlineCode(code=code):
                parts.append(f"<code>{html_escape(code)}</code>")
            case Link(label=label, url=url):
                attrs = f'href="{html_escape(url)}"'
                if self._link_target is not None:
                    attrs += f' target="{html_escape(self._link_target)}" rel="noopener noreferrer"'
                parts.append(f"<a {attrs}>{html_escape(label)}</a>")
            case UserMention(user_id=user_id, label=label):
                parts.append(
                    f'<span class="mention" data-user-id="{html_escape(user_id)}">'
                    f"@{html_escape(label)}</span>"
                )
            case RoleMention(role_id=role_id, label=label):
                parts.append(
                    f'<span class="role-mention" data-role-id="{html_escape(role_id)}">'
                    f"@{html_escape(label)}</span>"
                )
            case Emoji(name=name, url=url, animated=animated):
                alt = html_escape(f":{name}:")
                animated_attr = ' data-animated="true"' if animated else ""
                parts.append(
                    f'<img class="emoji" src="{html_escape(url)}" alt="{alt}" '
                    f'title="{alt}"{animated_attr} />'
                )
            case LineBreak():
                parts.append("<br />")
            case _:
                logger.debug("Cannot render inline %r", node)
                raise RenderError(type(self).__name__, node)


__all__ = [
    "HtmlRenderer",
    "html_escape",
]
