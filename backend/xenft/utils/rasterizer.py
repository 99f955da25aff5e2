"""SVG → PNG export via cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_PNG_SIZE = 800
PNG_BACKGROUND = "white"


def svg_to_png(
    svg: str,
    width: int = DEFAULT_PNG_SIZE,
    height: int = DEFAULT_PNG_SIZE,
    background: str | None = PNG_BACKGROUND,
) -> bytes:
    """Rasterize an SVG card to PNG bytes on a solid background."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
            background_color=background,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def png_filename(token_id: int) -> str:
    return f"XENFT-{token_id}.png"


def svg_filename(token_id: int) -> str:
    return f"XENFT-{token_id}.svg"
