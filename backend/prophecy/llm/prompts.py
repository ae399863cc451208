"""Quote prompt template, per-style visual hints, and the selectable sources/modes."""

from __future__ import annotations

DEFAULT_SOURCE = "Bible"
DEFAULT_MODE = "Prophecy"

SOURCES = ["Bible", "Quran", "Bhagavad Gita"]
MODES = ["Prophecy", "Motivation", "Love", "Inspiration", "Success Mantra", "Peace"]

_STYLE_HINTS = {
    "mystic": "Visual Vibe: Ancient, Magical, Enigmatic. Focus on mystery and spiritual depth.",
    "minimalist": "Visual Vibe: Serene, Holy, Simple, Clear. Focus on clarity, peace, and fundamental truths.",
    "obsidian": "Visual Vibe: Strong, Solid, Unshakable. Focus on endurance, strength, and power.",
    "crimson": "Visual Vibe: Urgent, Powerful, Intense. Focus on warning, passion, or sacrifice.",
    "retro": "Visual Vibe: Sci-fi, Visionary, Cybernetic. Focus on visions of the future and cosmic scale.",
}

_QUOTE_TEMPLATE = """Act as a spiritual scholar and curator.
Generate a UNIQUE, powerful quote from the **{source}**.

Theme/Mode: **{mode}**.
(Ensure the quote specifically relates to {mode}).

Style Context: {style_hint}

Random Seed: {seed}
Maximum length: {max_words} words.

Return ONLY a raw JSON object. No markdown, no code fences, no intro text.
{{"quote": "The exact text of the verse or quote.", "author": "Reference only, e.g. Isaiah 40:1, Surah Al-Sharh 94:5, Bhagavad Gita 2.47"}}"""


def get_style_hint(style: str | None) -> str:
    return _STYLE_HINTS.get(style or "", _STYLE_HINTS["mystic"])


def build_quote_prompt(
    source: str,
    mode: str,
    style: str | None,
    seed: int,
    max_words: int = 30,
) -> str:
    return _QUOTE_TEMPLATE.format(
        source=source,
        mode=mode,
        style_hint=get_style_hint(style),
        seed=seed,
        max_words=max_words,
    )
