"""Reference resolution: inline tokens to document inline nodes.

Mentions and emoji shortcodes are resolved against caller-supplied lookup
tables. A miss never drops the reference:

- user mention: label from ``RenderConfig.user_fallback_template``
- role mention: label from ``RenderConfig.role_fallback_template`` using the
  trailing ``role_suffix_length`` characters of the id
- emoji: the original ``:shortcode:`` text, unchanged

The default resolver is a pure function. Anything with the same call
signature (see Resolver) can replace it.

Thread Safety:
    Pure functions; no shared mutable state. The emoji index is built per call.

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from chatmark.config import get_render_config
from chatmark.inline.tokens import (
    CodeSpanToken,
    EmojiToken,
    InlineToken,
    LinkToken,
    RoleMentionToken,
    TextToken,
    UserMentionToken,
)
from chatmark.lookups import EmojiIndex, LookupTables
from chatmark.nodes import Emoji, Inline, InlineCode, Link, RoleMention, Text, UserMention


class Resolver(Protocol):
    """Protocol for reference resolvers.

    Implementations take one line's tokens and return its inline nodes. They
    must be total: every token yields a node.

    """

    def __call__(
        self,
        tokens: Sequence[InlineToken],
        lookups: LookupTables,
        *,
        emoji_index: EmojiIndex | None = None,
    ) -> tuple[Inline, ...]: ...


def user_label(user_id: str, users: Mapping[str, str]) -> tuple[str, bool]:
    """Display label for a user id and whether it came from the lookup."""
    label = users.get(user_id)
    if label is not None:
        return label, True
    return get_render_config().user_fallback_template.format(id=user_id, suffix=user_id), False


def role_label(role_id: str, roles: Mapping[str, str]) -> tuple[str, bool]:
    """Display label for a role id and whether it came from the lookup.

    Example:
        >>> role_label("1234567", {})
        ('group-4567', False)

    """
    label = roles.get(role_id)
    if label is not None:
        return label, True
    config = get_render_config()
    suffix = role_id[-config.role_suffix_length :]
    return config.role_fallback_template.format(id=role_id, suffix=suffix), False


def resolve_token(token: InlineToken, lookups: LookupTables, emoji_index: EmojiIndex) -> Inline:
    """Resolve a single token.

    Raises:
        TypeError: ``token`` is not an InlineToken.
    """
    match token:
        case TextToken(content=content):
            return Text(content)
        case CodeSpanToken(code=code):
            return InlineCode(code)
        case LinkToken(label=label, url=url):
            return Link(label=label, url=url)
        case UserMentionToken(user_id=user_id):
            label, resolved = user_label(user_id, lookups.users)
            return UserMention(user_id=user_id, label=label, resolved=resolved)
        case RoleMentionToken(role_id=role_id):
            label, resolved = role_label(role_id, lookups.roles)
            return RoleMention(role_id=role_id, label=label, resolved=resolved)
        case EmojiToken(shortcode=shortcode):
            emoji = emoji_index.get(shortcode)
            if emoji is None:
                return Text(token.source)
            return Emoji(
                emoji_id=emoji.id,
                name=emoji.name,
                url=emoji.url,
                animated=emoji.animated,
                shortcode=shortcode,
            )
    msg = f"Cannot resolve {type(token).__name__}: {token!r}"
    raise TypeError(msg)


def resolve_tokens(
    tokens: Sequence[InlineToken],
    lookups: LookupTables,
    *,
    emoji_index: EmojiIndex | None = None,
) -> tuple[Inline, ...]:
    """Resolve one line's tokens into inline nodes, in order.

    Args:
        tokens: Output of the inline tokenizer
        lookups: Lookup table snapshot for this call
        emoji_index: Index built from ``lookups.emojis``; pass one to share it
            across lines of the same document, otherwise it is built here

    Returns:
        One inline node per token.

    """
    if emoji_index is None:
        emoji_index = lookups.emoji_index()
    return tuple(resolve_token(token, lookups, emoji_index) for token in tokens)


__all__ = [
    "Resolver",
    "resolve_token",
    "resolve_tokens",
    "role_label",
    "user_label",
]
