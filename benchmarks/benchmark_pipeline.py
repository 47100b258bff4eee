"""Benchmark the chatmark pipeline stages.

Run with:
    pytest benchmarks/benchmark_pipeline.py -v --benchmark-only

Or for a quick timing:
    python benchmarks/benchmark_pipeline.py
"""

import time

import pytest

from chatmark import Chatmark, parse, render, segment, tokenize


@pytest.mark.benchmark(group="parse-corpus")
def test_benchmark_parse_corpus(benchmark, chat_corpus, chat_lookups):
    """Parse every corpus message against one snapshot."""

    def parse_all():
        for message in chat_corpus:
            parse(message, chat_lookups)

    benchmark(parse_all)


@pytest.mark.benchmark(group="parse-corpus")
def test_benchmark_parse_many(benchmark, chat_corpus, chat_lookups):
    """Same corpus through Chatmark.parse_many."""
    cm = Chatmark()
    benchmark(cm.parse_many, chat_corpus, chat_lookups)


@pytest.mark.benchmark(group="render-corpus")
def test_benchmark_render_corpus(benchmark, chat_corpus, chat_lookups):
    """Parse and render to HTML."""

    def render_all():
        for message in chat_corpus:
            render(parse(message, chat_lookups))

    benchmark(render_all)


@pytest.mark.benchmark(group="large-message")
def test_benchmark_segment_large(benchmark, large_message):
    """Block segmentation only."""
    benchmark(segment, large_message)


@pytest.mark.benchmark(group="large-message")
def test_benchmark_parse_large(benchmark, large_message, chat_lookups):
    """Full pipeline on one long message."""
    benchmark(parse, large_message, chat_lookups)


@pytest.mark.benchmark(group="adversarial")
def test_benchmark_tokenize_adversarial(benchmark, adversarial_line):
    """Unclosed delimiters stay linear."""
    benchmark(tokenize, adversarial_line)


def main() -> None:
    lines = ["x" * 10, "[a](https://x " * 500, "<@" * 500 + ":a" * 500]
    for size in (1, 10, 100):
        text = " ".join(line * size for line in lines)
        start = time.perf_counter()
        parse(text)
        elapsed = time.perf_counter() - start
        print(f"{len(text):>10,} chars  {elapsed * 1000:8.2f} ms")


if __name__ == "__main__":
    main()
