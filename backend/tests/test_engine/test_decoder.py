"""Tests for the packed mintInfo decoder."""

from __future__ import annotations

import random

import pytest

from tests.conftest import APEX_PACKED, COMMON_PACKED, MAX_RANK, NOW

from xenft.engine.decoder import (
    decode_mint_info,
    decode_or_default,
    extract,
    pack_mint_info,
    parse_packed,
)
from xenft.engine.errors import DecodeError
from xenft.models.mint_info import ClassFlags, DecodedMintInfo


def test_zero_decodes_to_all_zero():
    info = decode_mint_info(0)
    assert info == DecodedMintInfo()
    assert info.redeemed is False
    assert info.class_flags == ClassFlags(False, False, 0)
    assert info.rank_str == "0"


def test_only_redeemed_bit():
    info = decode_mint_info(1)
    assert info.redeemed is True
    assert info.class_flags == ClassFlags()
    assert (info.eaa, info.amp, info.rank, info.maturity_ts, info.term) == (0, 0, 0, 0, 0)


def test_class_byte_bits():
    assert decode_mint_info(1 << 8).class_flags.is_apex
    assert decode_mint_info(1 << 7).class_flags.is_limited
    flags = decode_mint_info(8 << 1).class_flags
    assert flags == ClassFlags(is_apex=False, is_limited=False, power_group_idx=8)
    assert decode_mint_info(0x3F << 1).class_flags.power_group_idx == 63


def test_field_offsets():
    value = (7 << 9) | (11 << 25) | (13 << 41) | (17 << 169) | (19 << 233)
    info = decode_mint_info(value)
    assert info.eaa == 7
    assert info.amp == 11
    assert info.rank == 13
    assert info.maturity_ts == 17
    assert info.term == 19


def test_full_width_fields_do_not_bleed():
    value = ((2**16 - 1) << 9) | ((2**64 - 1) << 169)
    info = decode_mint_info(value)
    assert info.eaa == 2**16 - 1
    assert info.amp == 0
    assert info.rank == 0
    assert info.maturity_ts == 2**64 - 1
    assert info.term == 0


def test_rank_full_128_bits_exact():
    info = decode_mint_info(MAX_RANK << 41)
    assert info.rank == MAX_RANK
    assert info.rank_str == "340282366920938463463374607431768211455"
    assert int(info.rank_str) == MAX_RANK


def test_rank_beyond_53_bits_is_exact():
    rank = 2**53 + 1
    assert decode_mint_info(rank << 41).rank_str == str(rank)


def test_high_bits_ignored():
    info = decode_mint_info((1 << 300) | (1 << 255) | (1 << 249) | 1)
    assert info == DecodedMintInfo(redeemed=True)


def test_sample_tokens():
    apex = decode_mint_info(APEX_PACKED)
    assert apex.class_flags == ClassFlags(is_apex=True, is_limited=False, power_group_idx=2)
    assert apex.term == 365
    assert apex.amp == 3000
    assert apex.eaa == 100
    assert apex.rank == 123_456_789_012_345_678_901_234_567
    assert apex.maturity_ts > NOW

    common = decode_mint_info(COMMON_PACKED)
    assert common.rank == MAX_RANK
    assert common.class_flags.power_group_idx == 8


@pytest.mark.parametrize("raw", [str(APEX_PACKED), hex(APEX_PACKED), f"  {APEX_PACKED}\n"])
def test_string_inputs(raw):
    assert decode_mint_info(raw) == decode_mint_info(APEX_PACKED)


def test_random_values_stay_in_range():
    rnd = random.Random(42)
    for _ in range(200):
        info = decode_mint_info(rnd.getrandbits(249))
        assert 0 <= info.class_flags.power_group_idx < 2**6
        assert 0 <= info.eaa < 2**16
        assert 0 <= info.amp < 2**16
        assert 0 <= info.rank < 2**128
        assert 0 <= info.maturity_ts < 2**64
        assert 0 <= info.term < 2**16


@pytest.mark.parametrize("raw", ["", "abc", "0xZZ", "1_0", "0x1_0", "\u0661\u0662", -1, "-5", 1.5, None, True, [1]])
def test_malformed_input_raises(raw):
    with pytest.raises(DecodeError):
        decode_mint_info(raw)


@pytest.mark.parametrize("raw", ["not a number", -1, None])
def test_decode_or_default_substitutes_zero_record(raw):
    assert decode_or_default(raw) == DecodedMintInfo()


def test_parse_packed_accepts_bytes():
    assert parse_packed(b"255") == 255


def test_extract():
    assert extract(0b101100, 2, 3) == 0b011


def test_pack_rejects_overflow():
    with pytest.raises(ValueError):
        pack_mint_info(term=2**16)
    with pytest.raises(ValueError):
        pack_mint_info(rank=-1)
