"""Shared test fixtures."""

from __future__ import annotations

import pytest

from prophecy.llm import client as llm_client


TINY_SVG = "<svg width='10' height='10' xmlns='http://www.w3.org/2000/svg'></svg>"

SVG_NS = "{http://www.w3.org/2000/svg}"

PSALM_JSON = '{"quote": "Be still, and know that I am God.", "author": "Psalm 46:10"}'

FENCED_GITA_JSON = '''```json
{"quote": "You have a right to perform your prescribed duties, but you are not entitled to the fruits of your actions.", "author": "Bhagavad Gita 2.47"}
```'''

SHORT_QUOTE = "abc"
TWO_LINE_QUOTE = "The quick brown fox jumps"
THREE_LINE_QUOTE = "one two three four five six seven eight nine ten eleven"


def stub_llm(monkeypatch: pytest.MonkeyPatch, reply: str | Exception) -> list[str]:
    """Replace the model call; returns the list of prompts it received."""
    prompts: list[str] = []

    async def _fake(api_key: str, prompt: str) -> str:
        prompts.append(prompt)
        if isinstance(reply, Exception):
            raise reply
        return reply

    monkeypatch.setattr(llm_client, "_request_quote_text", _fake)
    return prompts


@pytest.fixture
def tiny_svg() -> str:
    return TINY_SVG


@pytest.fixture
def psalm_llm(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    return stub_llm(monkeypatch, PSALM_JSON)


@pytest.fixture
def failing_llm(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    return stub_llm(monkeypatch, ConnectionError("service unavailable"))
