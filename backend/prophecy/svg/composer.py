"""Write the wallpaper SVG from a theme, a quote and its attribution."""

from __future__ import annotations

import math
import re
from xml.sax.saxutils import escape

from prophecy.svg.layout import DEFAULT_GEOMETRY, CanvasGeometry, layout_for
from prophecy.svg.text_wrap import wrap_text
from prophecy.svg.themes import Theme

_BACKGROUND_ID = "background"

# Code points outside the XML 1.0 Char production
_XML_INVALID = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _clean_text(text: str) -> str:
    return _XML_INVALID.sub("", text)


def _num(value: float) -> str:
    """Format a coordinate without trailing zeros (660.0 -> "660")."""
    return f"{round(value, 2):.2f}".rstrip("0").rstrip(".")


def _gradient_defs(theme: Theme, width: int, height: int) -> list[str]:
    bg = theme.background
    if not bg.is_gradient:
        return []

    if bg.kind == "radial":
        radius = math.hypot(width / 2, height / 2)
        open_tag = (
            f'<radialGradient id="{_BACKGROUND_ID}" gradientUnits="userSpaceOnUse"'
            f' cx="{_num(width / 2)}" cy="{_num(height / 2)}" r="{_num(radius)}">'
        )
        close_tag = "</radialGradient>"
    else:
        open_tag = f'<linearGradient id="{_BACKGROUND_ID}" x1="0" y1="0" x2="0" y2="1">'
        close_tag = "</linearGradient>"

    last = max(len(bg.stops) - 1, 1)
    stops = [
        f'      <stop offset="{_num(i * 100 / last)}%" stop-color="{color}" />'
        for i, color in enumerate(bg.stops)
    ]
    return ["  <defs>", f"    {open_tag}", *stops, f"    {close_tag}", "  </defs>"]


def _background_fill(theme: Theme) -> str:
    if theme.background.is_gradient:
        return f"url(#{_BACKGROUND_ID})"
    return theme.background.stops[0]


def compose(
    theme: Theme,
    quote: str,
    author: str,
    width: int = DEFAULT_GEOMETRY.width,
    height: int = DEFAULT_GEOMETRY.height,
    geometry: CanvasGeometry = DEFAULT_GEOMETRY,
) -> str:
    """Build the complete wallpaper document.

    The quote is wrapped and stacked as tspans centered on the canvas; the
    separator and author line follow the quote block (see ``layout_for``).
    Output depends only on the arguments. Quote and author text are
    stripped of characters XML cannot carry, then escaped, so any string
    yields a well-formed document.
    """
    quote_lines = wrap_text(_clean_text(quote), geometry.wrap_width)
    block = layout_for(len(quote_lines), geometry, height)

    cx = _num(width / 2)
    margin = geometry.margin
    font = theme.font

    tspans = "".join(
        f'<tspan x="{cx}" dy="{0 if i == 0 else geometry.quote_line_spacing}">{escape(line)}</tspan>'
        for i, line in enumerate(quote_lines)
    )

    lines = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}"'
        f' xmlns="http://www.w3.org/2000/svg">',
    ]
    lines.extend(_gradient_defs(theme, width, height))
    lines.append(f'  <rect width="{width}" height="{height}" fill="{_background_fill(theme)}" />')
    lines.append(
        f'  <rect x="{margin}" y="{margin}" width="{width - 2 * margin}" height="{height - 2 * margin}"'
        f' fill="none" stroke="{theme.accent}" stroke-width="{geometry.border_stroke}"'
        f' opacity="{_num(geometry.border_opacity)}" />'
    )

    lines.append("  <!-- Quote -->")
    lines.append(
        f'  <text x="{cx}" y="{_num(geometry.quote_start_y(height))}" text-anchor="middle"'
        f' fill="{theme.text}" font-family="{font}" font-size="{geometry.quote_font_size}"'
        f' font-weight="700">{tspans}</text>'
    )

    lines.append("  <!-- Separator -->")
    lines.append(
        f'  <rect x="{_num((width - geometry.separator_width) / 2)}" y="{_num(block.separator_y)}"'
        f' width="{geometry.separator_width}" height="{geometry.separator_height}"'
        f' fill="{theme.accent}" rx="{geometry.separator_radius}" />'
    )

    lines.append("  <!-- Author -->")
    lines.append(
        f'  <text x="{cx}" y="{_num(block.author_y)}" text-anchor="middle" fill="{theme.sub}"'
        f' font-family="{font}" font-size="{geometry.author_font_size}" font-weight="400"'
        f' letter-spacing="{geometry.author_letter_spacing}" text-transform="uppercase">'
        f"{escape(_clean_text(author))}</text>"
    )

    lines.append("  <!-- Footer -->")
    lines.append(
        f'  <text x="{cx}" y="{_num(height - geometry.footer_offset)}" text-anchor="middle"'
        f' fill="{theme.text}" opacity="{_num(geometry.footer_opacity)}" font-family="sans-serif"'
        f' font-size="{geometry.footer_font_size}" letter-spacing="{geometry.footer_letter_spacing}">'
        f"{geometry.footer_label}</text>"
    )

    lines.append("</svg>")
    return "\n".join(lines)
