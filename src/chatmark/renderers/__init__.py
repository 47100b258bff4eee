"""chatmark renderers.

Renderers turn a Document into an output format. The document is final:
renderers never re-read the original message text.

Available Renderers:
- HtmlRenderer: unstyled HTML, one element per node variant
- PlainTextRenderer: plain text for notifications and previews

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from chatmark.renderers.html import HtmlRenderer
from chatmark.renderers.protocol import Renderer
from chatmark.renderers.text import PlainTextRenderer

__all__ = ["HtmlRenderer", "PlainTextRenderer", "Renderer"]
