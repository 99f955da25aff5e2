"""Rarity classification from the class byte and burned XEN."""

from __future__ import annotations

import logging

from xenft.engine.errors import ClassificationError
from xenft.models.mint_info import ClassFlags, XenftAsset
from xenft.models.theme import RarityCategory, RarityInfo

logger = logging.getLogger(__name__)

GOLD = "#FFD700"
SILVER = "#C0C0C0"
BRONZE = "#CD7F32"
NEUTRAL_GRAY = "#808080"

# Strictly-greater-than thresholds, highest first.
APEX_TIERS: tuple[tuple[int, str], ...] = (
    (10_000_000, "Xunicorn"),
    (1_000_000, "Exotic"),
    (100_000, "Legendary"),
    (10_000, "Epic"),
)
APEX_FLOOR = "Rare"

COMMON_TIERS: tuple[tuple[int, str], ...] = (
    (6, "Uncommon"),
    (3, "Standard"),
)
COMMON_FLOOR = "Basic"

UNKNOWN = RarityInfo(RarityCategory.UNKNOWN, "Unknown", NEUTRAL_GRAY)


def _tier(value: int, tiers: tuple[tuple[int, str], ...], floor: str) -> str:
    for threshold, label in tiers:
        if value > threshold:
            return label
    return floor


def _class_flags(asset: XenftAsset) -> ClassFlags:
    mint_info = getattr(asset, "mint_info", None)
    flags = getattr(mint_info, "class_flags", None)
    if not isinstance(flags, ClassFlags):
        raise ClassificationError(f"class flags missing or malformed: {flags!r}")
    if not isinstance(flags.power_group_idx, int) or flags.power_group_idx < 0:
        raise ClassificationError(f"bad power group index: {flags.power_group_idx!r}")
    return flags


def classify_strict(asset: XenftAsset) -> RarityInfo:
    flags = _class_flags(asset)

    if flags.is_apex:
        burned = getattr(asset, "xen_burned", None)
        if isinstance(burned, bool) or not isinstance(burned, int) or burned < 0:
            raise ClassificationError(f"burned XEN must be a non-negative integer, got {burned!r}")
        return RarityInfo(
            RarityCategory.APEX,
            _tier(burned, APEX_TIERS, APEX_FLOOR),
            GOLD,
        )
    if flags.is_limited:
        return RarityInfo(RarityCategory.LIMITED, "Limited", SILVER)
    return RarityInfo(
        RarityCategory.COMMON,
        _tier(flags.power_group_idx, COMMON_TIERS, COMMON_FLOOR),
        BRONZE,
    )


def classify(asset: XenftAsset) -> RarityInfo:
    """Classify an asset. Malformed class data yields Unknown instead of raising."""
    try:
        return classify_strict(asset)
    except ClassificationError as e:
        logger.warning(
            "Classification failed for token %s: %s",
            getattr(asset, "token_id", None),
            e,
        )
        return UNKNOWN
