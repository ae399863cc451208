"""Greedy character-count line wrapping for SVG text blocks."""

from __future__ import annotations


def wrap_text(text: str, max_chars_per_line: int) -> list[str]:
    """Break ``text`` into lines of at most ``max_chars_per_line`` characters.

    Greedy fill: each word joins the current line if the line plus one space
    plus the word still fits, otherwise it starts a new line. Words are never
    split, so a word longer than the bound sits alone on an overflowing line.
    Length is a plain character count.

    Empty or whitespace-only text yields a single empty line.
    """
    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    for word in words[1:]:
        if len(current) + 1 + len(word) <= max_chars_per_line:
            current += " " + word
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines
