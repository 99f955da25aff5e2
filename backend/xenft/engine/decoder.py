"""Bit-field decoder for the XENFT packed mintInfo word.

Layout (LSB first):
    bit  0        redeemed
    bits 1-8      class byte: [7] isApex, [6] isLimited, [0-5] powerGroupIdx
    bits 9-24     eaa        (uint16)
    bits 25-40    amp        (uint16)
    bits 41-168   rank       (uint128)
    bits 169-232  maturityTs (uint64)
    bits 233-248  term       (uint16)

Bits above 248 are ignored.
"""

from __future__ import annotations

import logging
from typing import Any

from xenft.engine.errors import DecodeError
from xenft.models.mint_info import ClassFlags, DecodedMintInfo

logger = logging.getLogger(__name__)

# (offset, width) per field
REDEEMED = (0, 1)
CLASS = (1, 8)
EAA = (9, 16)
AMP = (25, 16)
RANK = (41, 128)
MATURITY_TS = (169, 64)
TERM = (233, 16)

_APEX_BIT = 0x80
_LIMITED_BIT = 0x40
_POWER_GROUP_MASK = 0x3F


def extract(value: int, offset: int, width: int) -> int:
    """Read ``width`` bits starting at ``offset``."""
    return (value >> offset) & ((1 << width) - 1)


def parse_packed(raw: Any) -> int:
    """Coerce an int, decimal string or 0x-hex string into a non-negative int.

    Floats are rejected outright: anything past 2**53 has already lost bits.
    """
    if isinstance(raw, bool) or isinstance(raw, float):
        raise DecodeError(f"unsupported packed value type: {type(raw).__name__}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, (str, bytes)):
        text = raw.decode("ascii", "replace") if isinstance(raw, bytes) else raw
        text = text.strip()
        # int() would also take digit separators and non-ASCII digits.
        if "_" in text or not text.isascii():
            raise DecodeError(f"not an integer: {text[:80]!r}")
        try:
            value = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError:
            raise DecodeError(f"not an integer: {text[:80]!r}") from None
    else:
        raise DecodeError(f"unsupported packed value type: {type(raw).__name__}")

    if value < 0:
        raise DecodeError(f"packed value must be non-negative, got {value}")
    return value


def decode_class(class_byte: int) -> ClassFlags:
    return ClassFlags(
        is_apex=bool(class_byte & _APEX_BIT),
        is_limited=bool(class_byte & _LIMITED_BIT),
        power_group_idx=class_byte & _POWER_GROUP_MASK,
    )


def decode_mint_info(raw: Any) -> DecodedMintInfo:
    """Decode a packed mintInfo value. Raises DecodeError on malformed input."""
    value = parse_packed(raw)
    return DecodedMintInfo(
        redeemed=bool(extract(value, *REDEEMED)),
        class_flags=decode_class(extract(value, *CLASS)),
        eaa=extract(value, *EAA),
        amp=extract(value, *AMP),
        rank=extract(value, *RANK),
        maturity_ts=extract(value, *MATURITY_TS),
        term=extract(value, *TERM),
    )


def decode_or_default(raw: Any) -> DecodedMintInfo:
    """Decode, falling back to an all-zero record so rendering can continue."""
    try:
        return decode_mint_info(raw)
    except DecodeError as e:
        logger.warning("mintInfo decode failed, using zero record: %s", e)
        return DecodedMintInfo()


def pack_mint_info(
    *,
    redeemed: bool = False,
    is_apex: bool = False,
    is_limited: bool = False,
    power_group_idx: int = 0,
    eaa: int = 0,
    amp: int = 0,
    rank: int = 0,
    maturity_ts: int = 0,
    term: int = 0,
) -> int:
    """Inverse of decode_mint_info; used to build fixtures and sample tokens."""
    class_byte = (
        (_APEX_BIT if is_apex else 0)
        | (_LIMITED_BIT if is_limited else 0)
        | (power_group_idx & _POWER_GROUP_MASK)
    )
    fields = [
        (int(redeemed), REDEEMED),
        (class_byte, CLASS),
        (eaa, EAA),
        (amp, AMP),
        (rank, RANK),
        (maturity_ts, MATURITY_TS),
        (term, TERM),
    ]
    value = 0
    for field_value, (offset, width) in fields:
        if field_value < 0 or field_value >> width:
            raise ValueError(f"value {field_value} does not fit in {width} bits")
        value |= field_value << offset
    return value
