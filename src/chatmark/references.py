"""Reference collection: what a message needs from the lookup tables.

Before rendering, callers fetch labels for the users and roles a message
mentions and the emoji it uses. collect_references runs the real segmenter and
tokenizer, so ids inside fenced code or inline code are not requested.

Example:
    >>> collect_references("hi <@1> <@!1> <@&7> `<@2>` :wave:")
    References(user_ids=('1',), role_ids=('7',), emoji_shortcodes=('wave',))

"""

from __future__ import annotations

from dataclasses import dataclass

from chatmark.blocks.segmenter import segment
from chatmark.blocks.types import (
    BlockquoteBlock,
    CodeBlock,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)
from chatmark.inline.tokenizer import tokenize_lines
from chatmark.inline.tokens import EmojiToken, RoleMentionToken, UserMentionToken


@dataclass(frozen=True, slots=True)
class References:
    """Distinct references in first-seen order.

    ``emoji_shortcodes`` keeps the first spelling seen for each
    case-insensitive name.

    """

    user_ids: tuple[str, ...] = ()
    role_ids: tuple[str, ...] = ()
    emoji_shortcodes: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.user_ids or self.role_ids or self.emoji_shortcodes)


def collect_references(content: str) -> References:
    """Collect user ids, role ids and emoji shortcodes referenced by content."""
    lines: list[str] = []
    for block in segment(content):
        match block:
            case HeadingBlock(text=text):
                lines.append(text)
            case ParagraphBlock(lines=block_lines) | BlockquoteBlock(lines=block_lines):
                lines.extend(block_lines)
            case ListBlock(items=items):
                lines.extend(items)
            case CodeBlock():
                pass

    # dicts keep insertion order and dedupe
    users: dict[str, None] = {}
    roles: dict[str, None] = {}
    emojis: dict[str, str] = {}
    for tokens in tokenize_lines(lines):
        for token in tokens:
            match token:
                case UserMentionToken(user_id=user_id):
                    users.setdefault(user_id)
                case RoleMentionToken(role_id=role_id):
                    roles.setdefault(role_id)
                case EmojiToken(shortcode=shortcode):
                    emojis.setdefault(shortcode.lower(), shortcode)

    return References(
        user_ids=tuple(users),
        role_ids=tuple(roles),
        emoji_shortcodes=tuple(emojis.values()),
    )


__all__ = [
    "References",
    "collect_references",
]
