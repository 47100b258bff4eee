"""Renderer protocol: stable interface for document renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` and ``PlainTextRenderer`` are reference
implementations.

Example:
    from chatmark.renderers.protocol import Renderer

    def render_message(renderer: Renderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from chatmark.nodes import Document


class Renderer(Protocol):
    """Protocol for document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string.

        Args:
            node: The document to render.

        Returns:
            Rendered string output.

        """
        ...
