"""LangChain ChatGoogleGenerativeAI wrapper for quote generation."""

from __future__ import annotations

import json
import logging
import random
import re

from prophecy.config import settings
from prophecy.llm.prompts import build_quote_prompt
from prophecy.models.quote import QuoteRecord

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = QuoteRecord(
    text="The light shines in the darkness, and the darkness has not overcome it.",
    author="John 1:5",
)


def _message_text(content: str | list) -> str:
    """Flatten an AIMessage content (plain string or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def parse_quote_response(text: str, source: str) -> QuoteRecord:
    """Parse the model's ``{"quote", "author"}`` JSON, leniently.

    Markdown fences are stripped first. Anything that does not parse into two
    non-empty strings becomes the quote verbatim, attributed to ``source``.
    """
    cleaned = re.sub(r"```(?:json)?", "", text.strip()).strip()

    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError):
        logger.info("Quote response is not JSON, using raw text")
        return QuoteRecord(text=cleaned, author=source)

    if isinstance(data, dict):
        quote = data.get("quote")
        author = data.get("author")
        if isinstance(quote, str) and quote.strip() and isinstance(author, str) and author.strip():
            return QuoteRecord(text=quote.strip(), author=author.strip())

    logger.info("Quote response JSON lacks quote/author, using raw text")
    return QuoteRecord(text=cleaned, author=source)


async def _request_quote_text(api_key: str, prompt: str) -> str:
    """Single completion call. Retries are disabled: one attempt per request."""
    from langchain_core.messages import HumanMessage
    from langchain_google_genai import ChatGoogleGenerativeAI

    llm = ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=api_key,
        temperature=settings.gemini_temperature,
        top_p=settings.gemini_top_p,
        top_k=settings.gemini_top_k,
        max_retries=0,
    )
    response = await llm.ainvoke([HumanMessage(content=prompt)])
    return _message_text(response.content)


async def generate_quote(
    api_key: str,
    source: str,
    mode: str,
    style: str | None = None,
) -> QuoteRecord:
    """Ask the model for a quote; fall back to ``FALLBACK_QUOTE`` on any failure."""
    prompt = build_quote_prompt(
        source=source,
        mode=mode,
        style=style,
        seed=random.randint(0, 999_999),
        max_words=settings.max_quote_words,
    )

    try:
        text = await _request_quote_text(api_key, prompt)
    except Exception as e:
        logger.warning("Quote generation failed (%s: %s), using fallback", type(e).__name__, e)
        return FALLBACK_QUOTE

    return parse_quote_response(text, source)
