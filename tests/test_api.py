"""Tests for the public API: parse, render, render_text and Chatmark."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from chatmark import (
    Chatmark,
    CustomEmoji,
    Document,
    Emoji,
    FencedCode,
    Heading,
    InlineCode,
    LookupTables,
    Paragraph,
    PlainTextRenderer,
    RenderConfig,
    RoleMention,
    Text,
    UserMention,
    get_render_config,
    parse,
    render,
    render_text,
)

SMILE = CustomEmoji(id="5", name="smile", url="https://cdn/5.png")


class TestParseScenarios:
    """End-to-end parsing of representative messages."""

    def test_heading_and_paragraph(self) -> None:
        assert parse("# Title\n\nSome text") == Document(
            children=(
                Heading(level=1, children=(Text("Title"),)),
                Paragraph(children=(Text("Some text"),)),
            )
        )

    def test_fenced_code(self) -> None:
        assert parse("```js\nconsole.log(1)\n```") == Document(
            children=(FencedCode(code="console.log(1)", language="js"),)
        )

    def test_code_span_shadows_mention(self) -> None:
        doc = parse("Hello `<@123>` and <@123>", LookupTables(users={"123": "ada"}))
        assert doc.children == (
            Paragraph(
                children=(
                    Text("Hello "),
                    InlineCode("<@123>"),
                    Text(" and "),
                    UserMention(user_id="123", label="ada", resolved=True),
                )
            ),
        )

    def test_known_emoji(self) -> None:
        doc = parse(":smile:", LookupTables(emojis=(SMILE,)))
        assert doc.children == (
            Paragraph(
                children=(
                    Emoji(emoji_id="5", name="smile", url="https://cdn/5.png", shortcode="smile"),
                )
            ),
        )

    def test_unknown_emoji(self) -> None:
        assert parse(":smile:").children == (Paragraph(children=(Text(":smile:"),)),)

    def test_no_space_heading_is_paragraph(self) -> None:
        assert parse("##NoSpace").children == (Paragraph(children=(Text("##NoSpace"),)),)

    def test_unterminated_fence(self) -> None:
        assert parse("```\nline1\nline2").children == (
            FencedCode(code="line1\nline2", language=None),
        )

    def test_role_fallback(self) -> None:
        assert parse("<@&1234567>").children == (
            Paragraph(
                children=(RoleMention(role_id="1234567", label="group-4567", resolved=False),)
            ),
        )

    def test_empty_message(self) -> None:
        assert parse("") == Document(children=())

    def test_deterministic(self) -> None:
        content = "# t <@1>\n- :smile:\n> [a](https://b)\n```\nx\n```"
        lookups = LookupTables(users={"1": "ada"}, emojis=(SMILE,))
        assert parse(content, lookups) == parse(content, lookups)

    def test_lookups_only_change_references(self) -> None:
        """Structure is the same whatever the lookup tables hold."""
        content = "# <@1>\n- <@&2> :smile:\ntext"
        bare = parse(content)
        full = parse(content, LookupTables(users={"1": "a"}, roles={"2": "b"}, emojis=(SMILE,)))
        assert [type(b) for b in bare.children] == [type(b) for b in full.children]


class TestRenderHelpers:
    """render and render_text wrap the default renderers."""

    def test_render_html(self) -> None:
        html = render(parse("# Hi <@1>", LookupTables(users={"1": "ada"})))
        assert html == '<h1>Hi <span class="mention" data-user-id="1">@ada</span></h1>\n'

    def test_render_text(self) -> None:
        assert render_text(parse("# Hi\n- <@1>")) == "Hi\n\n- @User 1"


class TestChatmark:
    """High-level processor."""

    def test_call_renders_html(self) -> None:
        assert Chatmark()("plain") == "<p>plain</p>\n"

    def test_config_applied_during_parse(self) -> None:
        cm = Chatmark(config=RenderConfig(user_fallback_template="someone"))
        assert cm("<@1>") == '<p><span class="mention" data-user-id="1">@someone</span></p>\n'

    def test_config_restored_after_call(self) -> None:
        before = get_render_config()
        Chatmark(config=RenderConfig(role_suffix_length=2)).parse("<@&123>")
        assert get_render_config() is before

    def test_config_property(self) -> None:
        config = RenderConfig(role_suffix_length=6)
        assert Chatmark(config=config).config is config

    def test_default_config(self) -> None:
        assert Chatmark().config == RenderConfig()

    def test_custom_renderer(self) -> None:
        cm = Chatmark(renderer=PlainTextRenderer())
        assert cm("> quoted <@1>") == "> quoted @User 1"

    def test_parse_many(self) -> None:
        cm = Chatmark(config=RenderConfig(role_suffix_length=2))
        docs = cm.parse_many(["<@&1234>", "text", ""])
        assert docs[0].children == (
            Paragraph(children=(RoleMention(role_id="1234", label="group-34", resolved=False),)),
        )
        assert docs[1].children == (Paragraph(children=(Text("text"),)),)
        assert docs[2] == Document(children=())

    def test_custom_resolver(self) -> None:
        def literal(tokens, lookups, *, emoji_index=None):  # type: ignore[no-untyped-def]
            return tuple(Text(token.source) for token in tokens)

        doc = Chatmark(resolver=literal).parse("<@1> :x:")
        assert doc.children == (Paragraph(children=(Text("<@1>"), Text(" "), Text(":x:"))),)


class TestConcurrency:
    """Documents are independent across threads and configs."""

    def test_concurrent_instances_with_different_configs(self) -> None:
        short = Chatmark(config=RenderConfig(role_suffix_length=1))
        long = Chatmark(config=RenderConfig(role_suffix_length=6))

        def run(index: int) -> tuple[int, str]:
            cm = short if index % 2 else long
            return index, cm("<@&123456789>")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(64)))

        for index, html in results:
            expected = "group-9" if index % 2 else "group-456789"
            assert f"@{expected}</span>" in html

    @pytest.mark.parametrize("content", ["# a", "- <@1>", "```\n<@1>\n```"])
    def test_shared_lookups_from_threads(self, content: str) -> None:
        lookups = LookupTables(users={"1": "ada"})
        with ThreadPoolExecutor(max_workers=4) as pool:
            docs = list(pool.map(lambda _: parse(content, lookups), range(16)))
        assert all(doc == docs[0] for doc in docs)
