"""Decoded mint info and the asset aggregate consumed by the composer.

Python ints are arbitrary precision, so ``rank`` and ``maturity_ts`` are kept
as plain ints and only rendered as decimal strings at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ClassFlags:
    """The class byte: bit 7 apex, bit 6 limited, bits 0-5 power group."""

    is_apex: bool = False
    is_limited: bool = False
    power_group_idx: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_apex": self.is_apex,
            "is_limited": self.is_limited,
            "power_group_idx": self.power_group_idx,
        }


@dataclass(frozen=True)
class DecodedMintInfo:
    """All fields unpacked from the 256-bit mintInfo word."""

    redeemed: bool = False
    class_flags: ClassFlags | None = field(default_factory=ClassFlags)
    eaa: int = 0
    amp: int = 0
    rank: int = 0
    maturity_ts: int = 0
    term: int = 0

    @property
    def rank_str(self) -> str:
        return str(self.rank)

    def to_dict(self) -> dict[str, Any]:
        return {
            "redeemed": self.redeemed,
            "class": self.class_flags.to_dict() if self.class_flags else None,
            "eaa": self.eaa,
            "amp": self.amp,
            "rank": self.rank_str,
            "maturity_ts": self.maturity_ts,
            "term": self.term,
        }


@dataclass(frozen=True)
class XenftAsset:
    """Everything the composer needs to draw one token."""

    token_id: int | None
    vmu_count: int = 0
    mint_info: DecodedMintInfo = field(default_factory=DecodedMintInfo)
    xen_burned: int = 0
    # Reported separately by the contract; rarity reads the class byte.
    is_apex: bool = False
