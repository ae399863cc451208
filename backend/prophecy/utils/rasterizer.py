"""SVG to PNG rasterization."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def svg_to_png(svg: str) -> bytes:
    """Render SVG markup to PNG bytes at its intrinsic size using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(bytestring=svg.encode("utf-8"))
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
