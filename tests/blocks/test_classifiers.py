"""Tests for the per-line block classifiers."""

import pytest

from chatmark.blocks.classifiers import (
    FenceMarker,
    HeadingMarker,
    is_blank,
    is_block_boundary,
    match_fence,
    match_heading,
    match_list_item,
    match_quote,
)


class TestMatchFence:
    """Fence lines: three backticks, optional tag, optional trailing space."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("```", FenceMarker(None)),
            ("```python", FenceMarker("python")),
            ("```c-sharp_2   ", FenceMarker("c-sharp_2")),
            ("```\t", FenceMarker(None)),
        ],
    )
    def test_fences(self, line: str, expected: FenceMarker) -> None:
        assert match_fence(line) == expected

    @pytest.mark.parametrize("line", ["``", "````", "```js x", "```c++", " ```", "text```"])
    def test_not_fences(self, line: str) -> None:
        assert match_fence(line) is None


class TestMatchHeading:
    """Heading lines."""

    def test_levels(self) -> None:
        assert match_heading("# a") == HeadingMarker(1, "a")
        assert match_heading("## a") == HeadingMarker(2, "a")
        assert match_heading("### a") == HeadingMarker(3, "a")

    @pytest.mark.parametrize("line", ["", "#", "#a", "####", "#### a", "# ", "a # b"])
    def test_not_headings(self, line: str) -> None:
        assert match_heading(line) is None

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("#  ", HeadingMarker(1, " ")),
            ("###\t\t", HeadingMarker(3, "\t")),
            ("# \t ", HeadingMarker(1, " ")),
        ],
    )
    def test_whitespace_text(self, line: str, expected: HeadingMarker) -> None:
        """The separator leaves the last whitespace character as text."""
        assert match_heading(line) == expected


class TestMatchListItem:
    """Bullet lines."""

    @pytest.mark.parametrize(
        "line,expected",
        [("- a", "a"), ("* a", "a"), ("-   spaced", "spaced"), ("-\titem", "item"), ("*  ", " ")],
    )
    def test_items(self, line: str, expected: str) -> None:
        assert match_list_item(line) == expected

    @pytest.mark.parametrize("line", ["", "-", "-a", "- ", "+ a", " - a", "**bold**"])
    def test_not_items(self, line: str) -> None:
        assert match_list_item(line) is None


class TestMatchQuote:
    """Quote lines; the marker and one whitespace character are removed."""

    @pytest.mark.parametrize(
        "line,expected",
        [(">", ""), ("> ", ""), (">a", "a"), ("> a", "a"), (">  a", " a"), (">\ta", "a")],
    )
    def test_quotes(self, line: str, expected: str) -> None:
        assert match_quote(line) == expected

    @pytest.mark.parametrize("line", ["", "a > b", " > a"])
    def test_not_quotes(self, line: str) -> None:
        assert match_quote(line) is None


class TestBoundaries:
    """Blank detection and paragraph interruption."""

    @pytest.mark.parametrize("line", ["", " ", "\t", " \t \r"])
    def test_blank(self, line: str) -> None:
        assert is_blank(line)

    def test_not_blank(self) -> None:
        assert not is_blank(" x ")

    @pytest.mark.parametrize("line", ["```", "# h", "- i", "> q", "-  ", "##  "])
    def test_openers_are_boundaries(self, line: str) -> None:
        assert is_block_boundary(line)

    @pytest.mark.parametrize("line", ["plain", "#### h", "-x", "````", "- ", "# "])
    def test_plain_lines_are_not_boundaries(self, line: str) -> None:
        assert not is_block_boundary(line)
