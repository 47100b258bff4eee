"""Inline tokenization.

Recognized forms, by priority:
- Inline code: `code`
- Links: [label](https://url)
- User mentions: <@123>, <@!123>
- Role mentions: <@&123>
- Emoji shortcodes: :name:

Everything else is literal text.
"""

from chatmark.inline.tokenizer import InlineTokenizer, tokenize, tokenize_lines
from chatmark.inline.tokens import (
    CodeSpanToken,
    EmojiToken,
    InlineToken,
    LinkToken,
    RoleMentionToken,
    TextToken,
    UserMentionToken,
)

__all__ = [
    "CodeSpanToken",
    "EmojiToken",
    "InlineToken",
    "InlineTokenizer",
    "LinkToken",
    "RoleMentionToken",
    "TextToken",
    "UserMentionToken",
    "tokenize",
    "tokenize_lines",
]
