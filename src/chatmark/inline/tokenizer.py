"""Inline tokenizer for one line of block text.

Single left-to-right scan. At each cursor position the scanner for the
character there is tried; the first construct that matches wins and the cursor
jumps past it. Because the recognized constructs start with distinct
characters (`` ` ``, ``[``, ``<``, ``:``) the earliest start always wins, and
the kind priority (inline code > link > user mention > role mention > emoji)
only has to break the ``<@`` tie between the two mention forms.

Everything not matched is emitted verbatim as TextToken, so the output is
gapless: ``"".join(t.source for t in tokens) == text``.

Complexity:
    O(n). Searches for a closing backtick or bracket are memoized per call
    (the cursor only moves forward, so a cached hit ahead of it stays valid),
    and the end of a link URL is found once per run of URL characters.

Thread Safety:
InlineTokenizer instances are single-use. Create one per line.

"""

from __future__ import annotations

import string

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

# Characters that can start an inline construct
INLINE_SPECIAL: frozenset[str] = frozenset("`[<:")

DIGITS: frozenset[str] = frozenset(string.digits)

SHORTCODE_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

type ScanResult = tuple[InlineToken, int] | None


class InlineTokenizer:
    """Tokenize a single line into InlineTokens.

    Usage:
        >>> InlineTokenizer("hi <@42> :wave:").tokenize()
        [TextToken(content='hi '), UserMentionToken(user_id='42', nickname=False),
         TextToken(content=' '), EmojiToken(shortcode='wave')]

    """

    __slots__ = ("_text", "_len", "_link_schemes", "_next_index", "_url_stop")

    def __init__(self, text: str, *, link_schemes: tuple[str, ...] | None = None) -> None:
        """Initialize tokenizer.

        Args:
            text: One line of block text
            link_schemes: URL prefixes accepted for links; defaults to the
                active RenderConfig
        """
        self._text = text
        self._len = len(text)
        if link_schemes is None:
            link_schemes = get_render_config().link_schemes
        self._link_schemes = link_schemes
        self._next_index: dict[str, int] = {}
        self._url_stop = -1

    def tokenize(self) -> list[InlineToken]:
        """Scan the line and return its tokens in order."""
        text = self._text
        text_len = self._len
        tokens: list[InlineToken] = []
        tokens_append = tokens.append
        pos = 0
        literal_start = 0

        while pos < text_len:
            char = text[pos]
            if char not in INLINE_SPECIAL:
                pos += 1
                continue

            result = self._scan(char, pos)
            if result is None:
                pos += 1
                continue

            token, end = result
            if literal_start < pos:
                tokens_append(TextToken(text[literal_start:pos]))
            tokens_append(token)
            pos = literal_start = end

        if literal_start < text_len:
            tokens_append(TextToken(text[literal_start:]))
        return tokens

    def _scan(self, char: str, pos: int) -> ScanResult:
        if char == "`":
            return self._scan_code_span(pos)
        if char == "[":
            return self._scan_link(pos)
        if char == "<":
            return self._scan_user_mention(pos) or self._scan_role_mention(pos)
        return self._scan_emoji(pos)

    def _find(self, char: str, start: int) -> int:
        """``str.find`` memoized per character for a forward-only cursor."""
        cached = self._next_index.get(char)
        if cached is not None and (cached == -1 or cached >= start):
            return cached
        found = self._text.find(char, start)
        self._next_index[char] = found
        return found

    def _scan_code_span(self, pos: int) -> ScanResult:
        """`code`: one or more non-backtick characters between backticks."""
        close = self._find("`", pos + 1)
        if close <= pos + 1:
            return None
        return CodeSpanToken(self._text[pos + 1 : close]), close + 1

    def _scan_link(self, pos: int) -> ScanResult:
        """[label](url) with an allowed scheme and no whitespace or ``)`` in url."""
        text = self._text
        close = self._find("]", pos + 1)
        if close <= pos + 1:
            return None

        url_start = close + 2
        if url_start > self._len or text[close + 1] != "(":
            return None

        stop = self._find_url_stop(url_start)
        if stop >= self._len or text[stop] != ")":
            return None

        for scheme in self._link_schemes:
            if text.startswith(scheme, url_start) and stop > url_start + len(scheme):
                return LinkToken(text[pos + 1 : close], text[url_start:stop]), stop + 1
        return None

    def _find_url_stop(self, start: int) -> int:
        """Index of the first whitespace or ``)`` at or after ``start``."""
        if start <= self._url_stop:
            return self._url_stop
        text = self._text
        text_len = self._len
        pos = start
        while pos < text_len and text[pos] != ")" and not text[pos].isspace():
            pos += 1
        self._url_stop = pos
        return pos

    def _scan_digits(self, start: int) -> int:
        text = self._text
        end = start
        while end < self._len and text[end] in DIGITS:
            end += 1
        return end

    def _scan_user_mention(self, pos: int) -> ScanResult:
        """<@digits> or <@!digits>."""
        text = self._text
        if not text.startswith("<@", pos):
            return None
        start = pos + 2
        nickname = start < self._len and text[start] == "!"
        if nickname:
            start += 1
        end = self._scan_digits(start)
        if end == start or end >= self._len or text[end] != ">":
            return None
        return UserMentionToken(text[start:end], nickname), end + 1

    def _scan_role_mention(self, pos: int) -> ScanResult:
        """<@&digits>."""
        text = self._text
        if not text.startswith("<@&", pos):
            return None
        start = pos + 3
        end = self._scan_digits(start)
        if end == start or end >= self._len or text[end] != ">":
            return None
        return RoleMentionToken(text[start:end]), end + 1

    def _scan_emoji(self, pos: int) -> ScanResult:
        """:name: with ASCII letters, digits and underscore."""
        text = self._text
        end = pos + 1
        while end < self._len and text[end] in SHORTCODE_CHARS:
            end += 1
        if end == pos + 1 or end >= self._len or text[end] != ":":
            return None
        return EmojiToken(text[pos + 1 : end]), end + 1


def tokenize(text: str) -> list[InlineToken]:
    """Tokenize block text into an ordered, gapless token list.

    Each ``\\n``-separated line is scanned independently, so no construct spans
    a line boundary; the newline itself is kept as literal text. Block text from
    the segmenter is always a single line.

    Example:
        >>> tokenize("Hello `<@123>` and <@123>")
        [TextToken(content='Hello '), CodeSpanToken(code='<@123>'),
         TextToken(content=' and '), UserMentionToken(user_id='123', nickname=False)]

    """
    if "\n" not in text:
        return InlineTokenizer(text).tokenize()

    link_schemes = get_render_config().link_schemes
    tokens: list[InlineToken] = []
    for index, line in enumerate(text.split("\n")):
        line_tokens = InlineTokenizer(line, link_schemes=link_schemes).tokenize()
        if index:
            line_tokens.insert(0, TextToken("\n"))
        for token in line_tokens:
            if isinstance(token, TextToken) and tokens and isinstance(tokens[-1], TextToken):
                tokens[-1] = TextToken(tokens[-1].content + token.content)
            else:
                tokens.append(token)
    return tokens


def tokenize_lines(lines: tuple[str, ...] | list[str]) -> list[list[InlineToken]]:
    """Tokenize each line independently (one token list per line)."""
    link_schemes = get_render_config().link_schemes
    return [InlineTokenizer(line, link_schemes=link_schemes).tokenize() for line in lines]


__all__ = [
    "InlineTokenizer",
    "tokenize",
    "tokenize_lines",
]
