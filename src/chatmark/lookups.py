"""Lookup table snapshots for reference resolution.

Callers own the data: they fetch user labels, role labels and custom emoji,
wrap the current snapshot in LookupTables and pass it to each parse call.
chatmark only reads it; nothing is copied into module state.

Example:
    >>> tables = LookupTables(
    ...     users={"123": "ada"},
    ...     emojis=(CustomEmoji(id="9", name="Party", url="https://cdn/9.png"),),
    ... )
    >>> tables.emoji_index().get("party").id
    '9'

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class CustomEmoji:
    """A custom emoji available to the message's audience."""

    id: str
    name: str
    url: str
    animated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CustomEmoji:
        """Build from the wire shape ``{"id", "name", "url", "animated"}``.

        Ids are coerced to ``str``; ``animated`` defaults to False.
        """
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            url=str(data["url"]),
            animated=bool(data.get("animated", False)),
        )


@dataclass(frozen=True, slots=True)
class EmojiIndex:
    """Case-insensitive emoji name index.

    Built per call from an emoji snapshot. When two emoji share a name
    (ignoring case) the later one wins.
    """

    by_name: Mapping[str, CustomEmoji]

    @classmethod
    def build(cls, emojis: Iterable[CustomEmoji]) -> EmojiIndex:
        return cls(by_name={emoji.name.lower(): emoji for emoji in emojis})

    def get(self, shortcode: str) -> CustomEmoji | None:
        return self.by_name.get(shortcode.lower())

    def __len__(self) -> int:
        return len(self.by_name)


@dataclass(frozen=True, slots=True)
class LookupTables:
    """Read-only snapshot of the data mentions and emoji resolve against.

    Attributes:
        users: user id -> display label
        roles: role id -> display label
        emojis: custom emoji, in priority order (later wins on name clash)

    """

    users: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    roles: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    emojis: tuple[CustomEmoji, ...] = ()

    def emoji_index(self) -> EmojiIndex:
        """Build a fresh name index for this snapshot."""
        return EmojiIndex.build(self.emojis)

    @classmethod
    def from_raw(
        cls,
        users: Mapping[str, str] | None = None,
        roles: Mapping[str, str] | None = None,
        emojis: Iterable[CustomEmoji | Mapping[str, Any]] | None = None,
    ) -> LookupTables:
        """Build from plain mappings and emoji dicts as delivered by an API.

        Example:
            >>> LookupTables.from_raw(
            ...     emojis=[{"id": 1, "name": "wave", "url": "https://cdn/1.png"}],
            ... ).emojis[0].id
            '1'

        """
        return cls(
            users=users if users is not None else _EMPTY,
            roles=roles if roles is not None else _EMPTY,
            emojis=tuple(
                emoji if isinstance(emoji, CustomEmoji) else CustomEmoji.from_dict(emoji)
                for emoji in (emojis or ())
            ),
        )


EMPTY_LOOKUPS = LookupTables()


__all__ = [
    "EMPTY_LOOKUPS",
    "CustomEmoji",
    "EmojiIndex",
    "LookupTables",
]
