"""Prophecy generation: quote from the model, then the themed SVG."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from prophecy.llm.client import generate_quote
from prophecy.llm.prompts import DEFAULT_MODE, DEFAULT_SOURCE
from prophecy.models.quote import QuoteRecord
from prophecy.svg import themes
from prophecy.svg.composer import compose

logger = logging.getLogger(__name__)


class MissingApiKeyError(ValueError):
    """Raised when no text-generation API key was supplied."""

    def __init__(self) -> None:
        super().__init__("API key is required")


@dataclass(frozen=True)
class ProphecyResult:
    svg: str
    quote: QuoteRecord


async def generate_prophecy(
    api_key: str,
    style: str | None = None,
    source: str | None = None,
    mode: str | None = None,
) -> ProphecyResult:
    """Generate one wallpaper.

    The model gets a single attempt; failures degrade to the built-in
    fallback quote, so only a missing key raises.
    """
    if not api_key:
        raise MissingApiKeyError()

    theme = themes.lookup(style)
    source = source or DEFAULT_SOURCE
    mode = mode or DEFAULT_MODE

    quote = await generate_quote(api_key, source=source, mode=mode, style=theme.id)
    logger.info("Composing %s wallpaper (%s / %s) for %s", theme.id, source, mode, quote.author)

    svg = compose(theme, quote.text, quote.author)
    return ProphecyResult(svg=svg, quote=quote)
