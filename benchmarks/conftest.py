"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from chatmark import CustomEmoji, LookupTables


@pytest.fixture
def chat_lookups() -> LookupTables:
    """A server-sized snapshot: 500 users, 50 roles, 200 emoji."""
    return LookupTables(
        users={str(1000 + i): f"member{i}" for i in range(500)},
        roles={str(900000 + i): f"role{i}" for i in range(50)},
        emojis=tuple(
            CustomEmoji(id=str(i), name=f"emote{i}", url=f"https://cdn.example/{i}.png")
            for i in range(200)
        ),
    )


@pytest.fixture
def chat_corpus() -> list[str]:
    """Typical short chat messages, mixed markup."""
    messages = []
    for i in range(200):
        messages.append(f"hey <@{1000 + i % 700}> did you see :emote{i % 250}: ?")
        messages.append(f"# Release {i}\n- fixed <@&{900000 + i % 60}> perms\n- `make build`")
        messages.append(f"> quoting <@!{1000 + i}>\nreply with [notes](https://example.com/{i})")
        messages.append(f"```py\nprint({i})  # <@{i}> stays literal\n```")
    return messages


@pytest.fixture
def large_message() -> str:
    """One long message (~100KB) hitting every construct."""
    sections = []
    for i in range(400):
        sections.append(
            f"## Section {i}\n"
            f"Paragraph with <@{1000 + i}>, <@&{900000 + i % 50}> and :emote{i % 200}:.\n"
            f"Second line `inline <@{i}>` and [link](https://example.com/{i}).\n\n"
            f"- item :unknown{i}:\n* item two\n\n"
            f"> quoted\n> lines\n\n"
            f"```\ncode {i}\n```\n"
        )
    return "\n".join(sections)


@pytest.fixture
def adversarial_line() -> str:
    """Unclosed delimiters that would backtrack in a naive regex scan."""
    return "[a](https://x " * 5000 + "<@" * 5000 + ":a" * 5000 + "`"
