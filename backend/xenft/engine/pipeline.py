"""Render pipeline: chain reads → decoded asset → rarity + scheme → SVG.

``render_token`` and ``render_gallery`` never raise. A malformed token yields
a degraded card (zeroed mint info) or the error card, and the batch goes on.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Iterable
from dataclasses import dataclass

from xenft.engine.clock import Instant, epoch_seconds
from xenft.engine.color_cycle import current_scheme
from xenft.engine.composer import compose_strict
from xenft.engine.decoder import decode_or_default
from xenft.engine.error_image import compose_error
from xenft.engine.errors import XenftError
from xenft.engine.rarity import UNKNOWN, classify
from xenft.models.chain import ChainTokenData
from xenft.models.mint_info import XenftAsset
from xenft.models.theme import ColorScheme, RarityInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    token_id: int | None
    svg: str
    rarity: RarityInfo
    scheme: ColorScheme
    asset: XenftAsset | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def build_asset(token_id: int | None, data: ChainTokenData) -> XenftAsset:
    return XenftAsset(
        token_id=token_id,
        vmu_count=data.vmu_count,
        mint_info=decode_or_default(data.packed_mint_info),
        xen_burned=data.xen_burned,
        is_apex=data.is_apex,
    )


def render_token(
    token_id: int | None,
    data: ChainTokenData,
    now: Instant = None,
    rng: random.Random | None = None,
) -> RenderResult:
    """Render one token. Time is pinned once so every layer sees the same instant."""
    pinned = epoch_seconds(now)
    scheme = current_scheme(pinned)
    asset = build_asset(token_id, data)
    rarity = classify(asset)
    try:
        svg = compose_strict(asset, pinned, rng)
    except XenftError as e:
        logger.warning("Token %s: rendering error card: %s", token_id, e)
        return RenderResult(
            token_id=token_id,
            svg=compose_error(str(e), pinned),
            rarity=rarity,
            scheme=scheme,
            asset=asset,
            error=str(e),
        )
    return RenderResult(token_id=token_id, svg=svg, rarity=rarity, scheme=scheme, asset=asset)


def render_gallery(
    items: Iterable[tuple[int | None, ChainTokenData | dict]],
    now: Instant = None,
    rng: random.Random | None = None,
) -> list[RenderResult]:
    """Render many tokens. Bad entries become error cards in place."""
    pinned = epoch_seconds(now)
    scheme = current_scheme(pinned)
    results: list[RenderResult] = []
    start = time.perf_counter()

    for token_id, raw in items:
        try:
            data = raw if isinstance(raw, ChainTokenData) else ChainTokenData.model_validate(raw)
        except ValueError as e:
            logger.warning("Token %s: invalid chain data: %s", token_id, e)
            results.append(RenderResult(
                token_id=token_id,
                svg=compose_error(f"Invalid data for XENFT #{token_id}", pinned),
                rarity=UNKNOWN,
                scheme=scheme,
                error=str(e),
            ))
            continue
        results.append(render_token(token_id, data, pinned, rng))

    logger.info(
        "Rendered %d tokens in %.0fms",
        len(results),
        (time.perf_counter() - start) * 1000,
    )
    return results
