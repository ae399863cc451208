"""Tests for quote generation and response parsing (model call stubbed)."""

import asyncio

from prophecy.llm.client import FALLBACK_QUOTE, _message_text, generate_quote, parse_quote_response
from prophecy.llm.prompts import build_quote_prompt, get_style_hint
from tests.conftest import FENCED_GITA_JSON, stub_llm


def test_parse_plain_json():
    record = parse_quote_response('{"quote": "Seek and ye shall find.", "author": "Matthew 7:7"}', "Bible")
    assert record.text == "Seek and ye shall find."
    assert record.author == "Matthew 7:7"


def test_parse_fenced_json():
    record = parse_quote_response(FENCED_GITA_JSON, "Bhagavad Gita")
    assert record.author == "Bhagavad Gita 2.47"
    assert record.text.startswith("You have a right")


def test_parse_non_json_uses_raw_text_and_source():
    record = parse_quote_response("  Verily, with hardship comes ease.  ", "Quran")
    assert record.text == "Verily, with hardship comes ease."
    assert record.author == "Quran"


def test_parse_json_without_author_falls_back():
    record = parse_quote_response('{"quote": "Peace be still."}', "Bible")
    assert record.author == "Bible"
    assert record.text == '{"quote": "Peace be still."}'


def test_parse_json_non_object_falls_back():
    record = parse_quote_response('"just a string"', "Bible")
    assert record.text == '"just a string"'
    assert record.author == "Bible"


def test_message_text_from_parts():
    assert _message_text("plain") == "plain"
    parts = [{"type": "text", "text": '{"quote": '}, {"type": "text", "text": '"x"}'}, {"type": "image"}]
    assert _message_text(parts) == '{"quote": "x"}'


def test_generate_quote_success(psalm_llm):
    record = asyncio.run(generate_quote("key", source="Bible", mode="Peace", style="obsidian"))
    assert record.text == "Be still, and know that I am God."
    assert record.author == "Psalm 46:10"

    prompt = psalm_llm[0]
    assert "**Bible**" in prompt
    assert "Peace" in prompt
    assert get_style_hint("obsidian") in prompt
    assert "30 words" in prompt


def test_generate_quote_failure_uses_fallback(failing_llm):
    record = asyncio.run(generate_quote("key", source="Quran", mode="Love"))
    assert record == FALLBACK_QUOTE
    assert record.author == "John 1:5"
    assert len(failing_llm) == 1


def test_generate_quote_unparseable_reply(monkeypatch):
    stub_llm(monkeypatch, "The Lord is my shepherd; I shall not want.")
    record = asyncio.run(generate_quote("key", source="Bible", mode="Peace"))
    assert record.text == "The Lord is my shepherd; I shall not want."
    assert record.author == "Bible"


def test_style_hint_fallback():
    assert get_style_hint("unknown") == get_style_hint("mystic")
    assert get_style_hint(None) == get_style_hint("mystic")
    assert get_style_hint("retro") != get_style_hint("mystic")


def test_prompt_contains_seed():
    prompt = build_quote_prompt("Quran", "Inspiration", "crimson", seed=4242, max_words=25)
    assert "4242" in prompt
    assert "25 words" in prompt
    assert get_style_hint("crimson") in prompt


def test_parse_deeply_nested_json_uses_raw_text():
    nested = "[" * 100000 + "]" * 100000
    record = parse_quote_response(nested, "Bible")
    assert record.author == "Bible"
    assert record.text == nested


def test_generate_quote_deeply_nested_reply(monkeypatch):
    stub_llm(monkeypatch, "{\"quote\": " + "[" * 100000 + "]" * 100000 + "}")
    record = asyncio.run(generate_quote("key", source="Quran", mode="Peace"))
    assert record.author == "Quran"
