"""Compose the XENFT card SVG from an asset, its rarity and the color cycle.

Layers, back to front:
    background rect
    decoration   random line segments (not reproducible)
    ring         outline at canvas centre
    orbits       VMU-driven circles on an ellipse
    diamond      rarity-colored centre motif
    overlay      token stats as text
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Any

import numpy as np

from xenft.engine.clock import SECONDS_PER_DAY, Instant, epoch_seconds, to_datetime
from xenft.engine.color_cycle import current_scheme
from xenft.engine.error_image import compose_error
from xenft.engine.errors import CompositionError, XenftError
from xenft.engine.rarity import classify
from xenft.models.mint_info import DecodedMintInfo, XenftAsset
from xenft.models.theme import ColorScheme, RarityInfo
from xenft.svg.serializer import fmt_num, serialize_svg

logger = logging.getLogger(__name__)

CANVAS_W = 400
CANVAS_H = 400

# Orbit ellipse: centre and radii.
ORBIT_CX = 50
ORBIT_CY = 200
ORBIT_RX = 300
ORBIT_RY = 150

MAX_CIRCLE_RADIUS = 100
MAX_CIRCLE_COUNT = 20
MAX_PATTERN_DENSITY = 5
LINES_PER_DENSITY = 20

DECORATION_OPACITY = 0.2
LINE_MIN_LEN = 20
LINE_MAX_LEN = 100

FONT = "Arial"
TEXT_COLOR = "white"

_INT_FIELDS = ("eaa", "amp", "rank", "maturity_ts", "term")


@dataclass(frozen=True)
class VisualParams:
    circle_radius: float
    circle_count: int
    pattern_density: float

    @property
    def line_count(self) -> int:
        # A fractional density still draws the partial line (loop runs while i < density*20).
        return math.ceil(self.pattern_density * LINES_PER_DENSITY)


def visual_params(vmu_count: int) -> VisualParams:
    return VisualParams(
        circle_radius=min(30 + vmu_count / 10, MAX_CIRCLE_RADIUS),
        circle_count=min(vmu_count, MAX_CIRCLE_COUNT),
        pattern_density=min(1 + vmu_count / 50, MAX_PATTERN_DENSITY),
    )


@dataclass(frozen=True)
class MaturityStatus:
    status: str
    days_to_maturity: int

    @property
    def label(self) -> str:
        if self.days_to_maturity > 0:
            return f"{self.status}: {self.days_to_maturity} days left"
        return f"{self.status}: Ready"


def maturity_status(maturity_ts: int, now: Instant = None) -> MaturityStatus:
    now_s = epoch_seconds(now)
    status = "Matured" if now_s > maturity_ts else "Maturing"
    return MaturityStatus(status, max(0, (maturity_ts - now_s) // SECONDS_PER_DAY))


def orbit_circles(params: VisualParams, fill: str) -> list[dict[str, Any]]:
    """Circles evenly spaced on the orbit ellipse. Zero circles is valid."""
    n = params.circle_count
    if n == 0:
        return []

    idx = np.arange(n, dtype=np.float64)
    angles = idx * (2 * math.pi / n)
    xs = ORBIT_CX + ORBIT_RX * np.sin(angles)
    ys = ORBIT_CY + ORBIT_RY * np.cos(angles)
    sizes = params.circle_radius * (0.5 + 0.5 * np.sin((idx / n) * math.pi))
    opacities = 0.3 + 0.7 * idx / n

    return [
        {
            "tag": "circle",
            "cx": float(x),
            "cy": float(y),
            "r": float(r),
            "fill": fill,
            "opacity": float(o),
            "class": "pulse-animation",
        }
        for x, y, r, o in zip(xs, ys, sizes, opacities)
    ]


def decoration_lines(
    count: int, stroke: str, rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    rng = rng or random.Random()
    lines: list[dict[str, Any]] = []
    for _ in range(count):
        x1 = rng.random() * CANVAS_W
        y1 = rng.random() * CANVAS_H
        length = rng.uniform(LINE_MIN_LEN, LINE_MAX_LEN)
        angle = rng.random() * 2 * math.pi
        lines.append({
            "tag": "line",
            "x1": x1,
            "y1": y1,
            "x2": x1 + length * math.cos(angle),
            "y2": y1 + length * math.sin(angle),
            "stroke": stroke,
            "stroke-width": "1",
            "opacity": DECORATION_OPACITY,
        })
    return lines


def diamond(fill: str) -> dict[str, Any]:
    cx, cy = CANVAS_W / 2, CANVAS_H / 2
    points = [(cx, 50), (cx + 40, cy - 20), (cx, CANVAS_H - 50), (cx - 40, cy - 20)]
    return {
        "tag": "polygon",
        "points": " ".join(f"{fmt_num(x)},{fmt_num(y)}" for x, y in points),
        "fill": fill,
        "opacity": 0.8,
    }


def ring(stroke: str) -> dict[str, Any]:
    return {
        "tag": "circle",
        "cx": CANVAS_W / 2,
        "cy": CANVAS_H / 2,
        "r": CANVAS_W / 3,
        "fill": "none",
        "stroke": stroke,
        "stroke-width": "10",
        "opacity": 0.8,
    }


def _text(y: float, content: str, size: int, fill: str = TEXT_COLOR, bold: bool = False) -> dict[str, Any]:
    elem: dict[str, Any] = {
        "tag": "text",
        "x": CANVAS_W / 2,
        "y": y,
        "fill": fill,
        "text-anchor": "middle",
        "font-family": FONT,
        "font-size": str(size),
    }
    if bold:
        elem["font-weight"] = "bold"
    elem["text"] = content
    return elem


def text_overlay(
    asset: XenftAsset, scheme: ColorScheme, maturity: MaturityStatus, now: Instant = None,
) -> list[dict[str, Any]]:
    info = asset.mint_info
    mid = CANVAS_H / 2
    return [
        _text(30, f"XENFT #{asset.token_id}", 20, bold=True),
        _text(mid - 45, f"VMUs: {asset.vmu_count}", 14),
        _text(mid - 25, f"Term: {info.term} days", 14),
        _text(mid - 5, f"Rank: {info.rank_str}", 14),
        _text(mid + 15, f"AMP: {info.amp}", 14),
        _text(mid + 35, f"EAA: {info.eaa}", 14),
        _text(mid + 55, maturity.label, 14),
        _text(CANVAS_H - 80, f"Color Cycle: {scheme.cycle_label}", 16, fill=scheme.primary, bold=True),
        _text(CANVAS_H - 60, f"Next cycle in {scheme.days_until_next_cycle} days", 12, fill=scheme.primary),
        _text(CANVAS_H - 30, f"Generated on {to_datetime(now).date().isoformat()}", 10),
    ]


def _validate(asset: XenftAsset) -> None:
    token_id = getattr(asset, "token_id", None)
    if token_id is None:
        raise CompositionError("asset has no token id")
    if isinstance(token_id, bool) or not isinstance(token_id, int) or token_id <= 0:
        raise CompositionError(f"token id must be a positive integer, got {token_id!r}")
    vmu_count = getattr(asset, "vmu_count", None)
    if isinstance(vmu_count, bool) or not isinstance(vmu_count, int) or vmu_count < 0:
        raise CompositionError(f"vmu count must be a non-negative integer, got {vmu_count!r}")
    mint_info = getattr(asset, "mint_info", None)
    if not isinstance(mint_info, DecodedMintInfo):
        raise CompositionError(f"asset has no decoded mint info, got {type(mint_info).__name__}")
    for name in _INT_FIELDS:
        value = getattr(mint_info, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise CompositionError(f"mint info {name} must be a non-negative integer, got {value!r}")


def compose_elements(
    asset: XenftAsset,
    scheme: ColorScheme,
    rarity: RarityInfo,
    now: Instant = None,
    rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    params = visual_params(asset.vmu_count)
    maturity = maturity_status(asset.mint_info.maturity_ts, now)
    return [
        {"tag": "rect", "width": "100%", "height": "100%", "fill": scheme.background},
        {"tag": "g", "id": "decoration",
         "children": decoration_lines(params.line_count, scheme.tertiary, rng)},
        ring(scheme.secondary),
        {"tag": "g", "id": "orbits", "children": orbit_circles(params, scheme.primary)},
        diamond(rarity.rarity_color),
        {"tag": "g", "id": "overlay", "children": text_overlay(asset, scheme, maturity, now)},
    ]


def compose_strict(
    asset: XenftAsset,
    now: Instant = None,
    rng: random.Random | None = None,
) -> str:
    """Compose the card. Raises CompositionError when required fields are missing."""
    _validate(asset)
    now = epoch_seconds(now)
    scheme = current_scheme(now)
    rarity = classify(asset)
    elements = compose_elements(asset, scheme, rarity, now, rng)
    return serialize_svg(elements, CANVAS_W, CANVAS_H)


def compose(
    asset: XenftAsset,
    now: Instant = None,
    rng: random.Random | None = None,
) -> str:
    """Compose the card, or the error image if the asset cannot be drawn."""
    try:
        return compose_strict(asset, now, rng)
    except XenftError as e:
        logger.warning("Composition failed for token %s: %s", getattr(asset, "token_id", None), e)
        return compose_error(str(e), now)
