"""Canvas geometry and vertical-flow placement for the wallpaper template.

Everything below the quote block is positioned from the number of wrapped
quote lines: a longer quote pushes the separator and author line down by
exactly ``per_line_height`` per extra line. The footer is pinned to the
bottom edge regardless of content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class CanvasGeometry:
    # Portrait phone lockscreen
    width: int = 1320
    height: int = 2868

    # Border frame
    margin: int = 60
    border_stroke: int = 4
    border_opacity: float = 0.5

    # Quote block
    quote_start_ratio: float = 0.35
    wrap_width: int = 20
    quote_font_size: int = 84
    quote_line_spacing: str = "1.2em"
    per_line_height: int = 100

    # Separator bar
    separator_gap: int = 40
    separator_width: int = 120
    separator_height: int = 6
    separator_radius: int = 3

    # Author line, measured from the top of the quote block
    author_gap: int = 140
    author_font_size: int = 42
    author_letter_spacing: int = 2

    # Footer mark
    footer_offset: int = 150
    footer_font_size: int = 32
    footer_letter_spacing: int = 8
    footer_opacity: float = 0.3
    footer_label: str = "PROPHECY"

    def quote_start_y(self, height: float | None = None) -> float:
        return (self.height if height is None else height) * self.quote_start_ratio


DEFAULT_GEOMETRY = CanvasGeometry()


class BlockLayout(NamedTuple):
    separator_y: float
    author_y: float


def compute_layout(
    quote_start_y: float,
    line_count: int,
    per_line_height: float,
    separator_gap: float,
    author_gap: float,
) -> BlockLayout:
    """Place the separator and author line below a quote of ``line_count`` lines."""
    block_end = quote_start_y + line_count * per_line_height
    return BlockLayout(
        separator_y=block_end + separator_gap,
        author_y=block_end + author_gap,
    )


def layout_for(
    line_count: int,
    geometry: CanvasGeometry = DEFAULT_GEOMETRY,
    height: float | None = None,
) -> BlockLayout:
    return compute_layout(
        geometry.quote_start_y(height),
        line_count,
        geometry.per_line_height,
        geometry.separator_gap,
        geometry.author_gap,
    )
