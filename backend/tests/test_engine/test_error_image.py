"""Tests for the fallback error card."""

from __future__ import annotations

from tests.conftest import NOW, SVG_NS, parse, texts

from xenft.engine.error_image import ERROR_BACKGROUND, ERROR_TITLE_COLOR, MAX_MESSAGE_LINES, compose_error


def test_layout():
    root = parse(compose_error("Token not found", now=NOW))
    rect = root.find(f"{SVG_NS}rect")
    assert rect.get("fill") == ERROR_BACKGROUND
    title = root.find(f"{SVG_NS}text")
    assert title.get("fill") == ERROR_TITLE_COLOR
    assert texts(root) == ["Error Rendering XENFT", "Token not found", "2024-01-01 00:00:00 UTC"]


def test_message_is_escaped():
    lines = texts(parse(compose_error("<script>&</script>", now=NOW)))
    assert "<script>&</script>" in lines


def test_long_message_is_wrapped_and_truncated():
    lines = texts(parse(compose_error("word " * 200, now=NOW)))
    body = lines[1:-1]
    assert len(body) == MAX_MESSAGE_LINES
    assert body[-1].endswith("...")


def test_never_raises_on_odd_input():
    class Unprintable:
        def __str__(self):
            raise RuntimeError("nope")

    for message in ["", None, 12345, Unprintable()]:
        assert parse(compose_error(message, now=NOW)) is not None
    assert parse(compose_error("bad clock", now=float("nan"))) is not None
