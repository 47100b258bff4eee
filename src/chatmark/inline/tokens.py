"""Typed inline tokens for the chatmark tokenizer.

Uses NamedTuples for inline token representation, providing:
- Immutability by default
- Tuple unpacking and ``match`` support
- Low memory footprint for messages with many tokens

Every token exposes ``source``, its literal form in the input line. Joining the
``source`` of a line's tokens reproduces the line exactly.

Thread Safety:
All tokens are immutable and safe to share across threads.

Usage:
    match token:
        case UserMentionToken(user_id=user_id):
            print(f"mentions {user_id}")

"""

from __future__ import annotations

from typing import Literal, NamedTuple


class TextToken(NamedTuple):
    """Literal text, including whitespace and unmatched delimiters.

    Attributes:
        content: The text content.

    """

    content: str

    @property
    def type(self) -> Literal["text"]:
        """Token type identifier for dispatch."""
        return "text"

    @property
    def source(self) -> str:
        return self.content


class CodeSpanToken(NamedTuple):
    """Inline code span. Markdown: `code`

    Attributes:
        code: Raw interior text, never tokenized further.

    """

    code: str

    @property
    def type(self) -> Literal["code_span"]:
        """Token type identifier for dispatch."""
        return "code_span"

    @property
    def source(self) -> str:
        return f"`{self.code}`"


class LinkToken(NamedTuple):
    """Hyperlink. Markdown: [label](https://url)"""

    label: str
    url: str

    @property
    def type(self) -> Literal["link"]:
        """Token type identifier for dispatch."""
        return "link"

    @property
    def source(self) -> str:
        return f"[{self.label}]({self.url})"


class UserMentionToken(NamedTuple):
    """User mention. Markup: <@123> or <@!123>

    Attributes:
        user_id: The digit id.
        nickname: True for the ``<@!id>`` form. Both forms resolve the same way.

    """

    user_id: str
    nickname: bool = False

    @property
    def type(self) -> Literal["user_mention"]:
        """Token type identifier for dispatch."""
        return "user_mention"

    @property
    def source(self) -> str:
        return f"<@!{self.user_id}>" if self.nickname else f"<@{self.user_id}>"


class RoleMentionToken(NamedTuple):
    """Role mention. Markup: <@&123>"""

    role_id: str

    @property
    def type(self) -> Literal["role_mention"]:
        """Token type identifier for dispatch."""
        return "role_mention"

    @property
    def source(self) -> str:
        return f"<@&{self.role_id}>"


class EmojiToken(NamedTuple):
    """Custom emoji shortcode. Markup: :name:

    Attributes:
        shortcode: The name between the colons, as typed.

    """

    shortcode: str

    @property
    def type(self) -> Literal["emoji"]:
        """Token type identifier for dispatch."""
        return "emoji"

    @property
    def source(self) -> str:
        return f":{self.shortcode}:"


type InlineToken = (
    TextToken | CodeSpanToken | LinkToken | UserMentionToken | RoleMentionToken | EmojiToken
)


__all__ = [
    "CodeSpanToken",
    "EmojiToken",
    "InlineToken",
    "LinkToken",
    "RoleMentionToken",
    "TextToken",
    "UserMentionToken",
]
