"""Theme registry: the five wallpaper palettes, looked up by style id.

Usage:
    theme = themes.lookup("crimson")
    theme.background.kind  # "linear"

Lookup is lenient: None, "" or an unknown id resolves to the default theme,
so raw query parameters can be passed straight through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

BackgroundKind = Literal["solid", "linear", "radial"]
FontFamily = Literal["serif", "sans-serif", "monospace"]

DEFAULT_STYLE = "mystic"


@dataclass(frozen=True)
class Background:
    """Canvas fill: one color for ``solid``, start/end stops for gradients.

    Linear gradients run top to bottom. Radial gradients are centered
    circles reaching the farthest corner of the canvas.
    """

    kind: BackgroundKind
    stops: tuple[str, ...]

    @property
    def is_gradient(self) -> bool:
        return self.kind != "solid"


@dataclass(frozen=True)
class Theme:
    id: str
    background: Background
    text: str
    accent: str
    sub: str
    font: FontFamily


class ThemeRegistry:
    """Ordered registry of themes with a designated fallback."""

    def __init__(self, default_id: str = DEFAULT_STYLE) -> None:
        self._themes: dict[str, Theme] = {}
        self._default_id = default_id

    def register(self, theme: Theme) -> None:
        if theme.id in self._themes:
            raise ValueError(f"Duplicate theme ID: {theme.id}")
        self._themes[theme.id] = theme
        logger.debug("Registered theme %s (%s)", theme.id, theme.background.kind)

    def lookup(self, style_id: str | None) -> Theme:
        """Return the theme for ``style_id``, or the default theme."""
        if style_id and style_id in self._themes:
            return self._themes[style_id]
        return self._themes[self._default_id]

    @property
    def default(self) -> Theme:
        return self._themes[self._default_id]

    @property
    def ids(self) -> list[str]:
        return list(self._themes)

    @property
    def count(self) -> int:
        return len(self._themes)


registry = ThemeRegistry()

registry.register(Theme(
    id="mystic",
    background=Background("radial", ("#2d1b4e", "#000000")),
    text="#ffffff",
    accent="#a855f7",
    sub="#d8b4fe",
    font="serif",
))
registry.register(Theme(
    id="minimalist",
    background=Background("solid", ("#f3f4f6",)),
    text="#1f2937",
    accent="#9ca3af",
    sub="#6b7280",
    font="sans-serif",
))
registry.register(Theme(
    id="obsidian",
    background=Background("solid", ("#09090b",)),
    text="#e4e4e7",
    accent="#27272a",
    sub="#a1a1aa",
    font="sans-serif",
))
registry.register(Theme(
    id="crimson",
    background=Background("linear", ("#450a0a", "#000000")),
    text="#fecaca",
    accent="#7f1d1d",
    sub="#f87171",
    font="serif",
))
registry.register(Theme(
    id="retro",
    background=Background("linear", ("#1e1b4b", "#2e1065")),
    text="#22d3ee",
    accent="#d946ef",
    sub="#c084fc",
    font="monospace",
))


def lookup(style_id: str | None) -> Theme:
    return registry.lookup(style_id)
