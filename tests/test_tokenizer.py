"""Tests for the inline tokenizer.

Covers each construct, priority between overlapping constructs, literal
fallback for malformed delimiters and the link scheme allowlist.
"""

import pytest

from chatmark.config import RenderConfig, render_config_context
from chatmark.inline import (
    CodeSpanToken,
    EmojiToken,
    InlineTokenizer,
    LinkToken,
    RoleMentionToken,
    TextToken,
    UserMentionToken,
    tokenize,
    tokenize_lines,
)


class TestConstructs:
    """One construct at a time."""

    def test_empty(self) -> None:
        assert tokenize("") == []

    def test_plain_text(self) -> None:
        assert tokenize("just words") == [TextToken("just words")]

    def test_code_span(self) -> None:
        assert tokenize("run `make`") == [TextToken("run "), CodeSpanToken("make")]

    def test_link(self) -> None:
        assert tokenize("[docs](https://example.com/a?b=c)") == [
            LinkToken("docs", "https://example.com/a?b=c"),
        ]

    def test_user_mention(self) -> None:
        assert tokenize("<@123>") == [UserMentionToken("123")]

    def test_nickname_mention(self) -> None:
        assert tokenize("<@!123>") == [UserMentionToken("123", nickname=True)]

    def test_role_mention(self) -> None:
        assert tokenize("<@&987>") == [RoleMentionToken("987")]

    def test_emoji(self) -> None:
        assert tokenize(":party_parrot2:") == [EmojiToken("party_parrot2")]

    def test_mixed(self) -> None:
        assert tokenize("hi <@1>, see [x](http://x.io) :wave:") == [
            TextToken("hi "),
            UserMentionToken("1"),
            TextToken(", see "),
            LinkToken("x", "http://x.io"),
            TextToken(" "),
            EmojiToken("wave"),
        ]


class TestPriority:
    """Code spans shadow everything inside them."""

    def test_code_span_hides_mention(self) -> None:
        assert tokenize("Hello `<@123>` and <@123>") == [
            TextToken("Hello "),
            CodeSpanToken("<@123>"),
            TextToken(" and "),
            UserMentionToken("123"),
        ]

    def test_code_span_hides_emoji_and_link(self) -> None:
        assert tokenize("`:x: [a](https://b)`") == [CodeSpanToken(":x: [a](https://b)")]

    def test_earliest_start_wins(self) -> None:
        """A link label starting before a code span keeps the backticks."""
        assert tokenize("[`a`](https://b)") == [LinkToken("`a`", "https://b")]

    def test_emoji_in_link_label_is_not_tokenized(self) -> None:
        assert tokenize("[:x:](https://b)") == [LinkToken(":x:", "https://b")]


class TestMalformed:
    """Unmatched or invalid delimiters stay literal text."""

    @pytest.mark.parametrize(
        "text",
        [
            "`unclosed",
            "``",
            "[label](ftp://host)",
            "[label](https://)",
            "[label] (https://x)",
            "[](https://x)",
            "[label](https://x y)",
            "[label](https://x",
            "<@abc>",
            "<@>",
            "<@!>",
            "<@&>",
            "<@12",
            "<@ 12>",
            "::",
            ":a b:",
            ":no-dash:",
            "time 10:30",
        ],
    )
    def test_literal(self, text: str) -> None:
        assert tokenize(text) == [TextToken(text)]

    def test_double_backtick_then_span(self) -> None:
        assert tokenize("``a`") == [TextToken("`"), CodeSpanToken("a")]

    def test_url_stops_at_close_paren(self) -> None:
        assert tokenize("[a](https://x)y)") == [LinkToken("a", "https://x"), TextToken("y)")]

    def test_label_may_contain_open_bracket(self) -> None:
        assert tokenize("[[a](https://x)") == [LinkToken("[a", "https://x")]

    def test_adjacent_emoji_share_no_colon(self) -> None:
        assert tokenize(":a:b:") == [EmojiToken("a"), TextToken("b:")]

    def test_unicode_shortcode_is_literal(self) -> None:
        assert tokenize(":café:") == [TextToken(":café:")]

    def test_non_ascii_digits_are_not_ids(self) -> None:
        assert tokenize("<@١٢>") == [TextToken("<@١٢>")]


class TestMultiline:
    """Constructs never span a newline."""

    def test_code_span_does_not_cross_lines(self) -> None:
        assert tokenize("`a\nb`") == [TextToken("`a\nb`")]

    def test_newline_kept_and_merged(self) -> None:
        assert tokenize("<@1>\nhi") == [UserMentionToken("1"), TextToken("\nhi")]

    def test_tokenize_lines(self) -> None:
        assert tokenize_lines(("a <@1>", ":x:")) == [
            [TextToken("a "), UserMentionToken("1")],
            [EmojiToken("x")],
        ]


class TestLinkSchemes:
    """Accepted URL prefixes come from RenderConfig."""

    def test_https_only(self) -> None:
        with render_config_context(RenderConfig(link_schemes=("https://",))):
            assert tokenize("[a](http://x)") == [TextToken("[a](http://x)")]
            assert tokenize("[a](https://x)") == [LinkToken("a", "https://x")]

    def test_explicit_schemes_override_config(self) -> None:
        tokens = InlineTokenizer("[a](mailto:me@x.io)", link_schemes=("mailto:",)).tokenize()
        assert tokens == [LinkToken("a", "mailto:me@x.io")]

    def test_scheme_match_is_case_sensitive(self) -> None:
        assert tokenize("[a](HTTPS://x)") == [TextToken("[a](HTTPS://x)")]


class TestGapless:
    """Joining ``source`` reproduces the input."""

    @pytest.mark.parametrize(
        "text",
        [
            "Hello `<@123>` and <@!123> <@&5> :x: [l](https://u) tail",
            "[[[]]](((https://",
            "<<@@1>> ::a:: ``` `",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        assert "".join(token.source for token in tokenize(text)) == text

    def test_long_adversarial_line(self) -> None:
        text = "[a](https://x " * 2000 + "`" + "<@" * 2000
        assert "".join(token.source for token in tokenize(text)) == text
