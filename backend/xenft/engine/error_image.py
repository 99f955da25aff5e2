"""Fallback card shown when a token cannot be rendered."""

from __future__ import annotations

import logging
import textwrap
from datetime import datetime, timezone

from xenft.engine.clock import Instant, to_datetime
from xenft.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

ERROR_CANVAS = 400
ERROR_BACKGROUND = "#1A1A1A"
ERROR_TITLE_COLOR = "#FF4D4D"
WRAP_WIDTH = 40
MAX_MESSAGE_LINES = 6


def _message_lines(message: object) -> list[str]:
    try:
        text = str(message)
    except Exception:
        text = "Unknown error"
    lines = textwrap.wrap(text, WRAP_WIDTH) or ["Unknown error"]
    if len(lines) > MAX_MESSAGE_LINES:
        lines = lines[:MAX_MESSAGE_LINES]
        lines[-1] = lines[-1][: WRAP_WIDTH - 3] + "..."
    return lines


def _timestamp(now: Instant) -> str:
    try:
        stamp = to_datetime(now)
    except (TypeError, ValueError, OverflowError, OSError):
        logger.debug("Unusable timestamp %r, using current time", now)
        stamp = datetime.now(timezone.utc)
    return stamp.strftime("%Y-%m-%d %H:%M:%S UTC")


def compose_error(message: object, now: Instant = None) -> str:
    """Minimal error card: dark background, red title, white message, timestamp."""
    mid = ERROR_CANVAS / 2
    elements = [
        {"tag": "rect", "width": "100%", "height": "100%", "fill": ERROR_BACKGROUND},
        {
            "tag": "text", "x": mid, "y": 80, "fill": ERROR_TITLE_COLOR,
            "text-anchor": "middle", "font-family": "Arial", "font-size": "24",
            "font-weight": "bold", "text": "Error Rendering XENFT",
        },
    ]
    for i, line in enumerate(_message_lines(message)):
        elements.append({
            "tag": "text", "x": mid, "y": 160 + i * 22, "fill": "white",
            "text-anchor": "middle", "font-family": "Arial", "font-size": "14",
            "text": line,
        })
    elements.append({
        "tag": "text", "x": mid, "y": ERROR_CANVAS - 30, "fill": "#AAAAAA",
        "text-anchor": "middle", "font-family": "Arial", "font-size": "10",
        "text": _timestamp(now),
    })
    return serialize_svg(elements, ERROR_CANVAS, ERROR_CANVAS)
