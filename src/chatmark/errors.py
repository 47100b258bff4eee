"""Exception classes for chatmark.

Parsing message content never raises. These exceptions cover the surfaces
around the pipeline: configuration, serialization and rendering.
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base exception for all chatmark errors."""

    pass


class ConfigError(ChatmarkError, ValueError):
    """Invalid RenderConfig value.

    Raised when the config is constructed, never during parsing.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"RenderConfig.{field_name}: {message}")


class SerializationError(ChatmarkError, ValueError):
    """Serialized data does not describe a chatmark document."""

    pass


class RenderError(ChatmarkError):
    """Error during rendering.

    Raised when a renderer is handed an object that is not a document node.
    """

    def __init__(self, renderer: str, node: object) -> None:
        self.renderer = renderer
        self.node = node
        super().__init__(f"{renderer} cannot render {type(node).__name__!s}: {node!r}")
