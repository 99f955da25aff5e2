"""Shared test fixtures."""

from __future__ import annotations

import random
import xml.etree.ElementTree as ET

import pytest

from xenft.engine.decoder import pack_mint_info
from xenft.models.chain import ChainTokenData

SVG_NS = "{http://www.w3.org/2000/svg}"

# 2024-01-01T00:00:00Z: day 19723 since epoch -> cycle 9 (label 10/12), 17 days left.
NOW = 1704067200
NOW_CYCLE_INDEX = 9
NOW_DAYS_UNTIL_NEXT = 17

DAY = 86400

MAX_RANK = 2**128 - 1

# Apex token, heavily burned, maturing in 10 days.
APEX_PACKED = pack_mint_info(
    is_apex=True,
    power_group_idx=2,
    eaa=100,
    amp=3000,
    rank=123_456_789_012_345_678_901_234_567,
    maturity_ts=NOW + 10 * DAY + 60,
    term=365,
)

# Limited token, matured yesterday.
LIMITED_PACKED = pack_mint_info(
    is_limited=True,
    eaa=50,
    amp=2500,
    rank=42,
    maturity_ts=NOW - DAY,
    term=100,
)

# Common token in power group 8.
COMMON_PACKED = pack_mint_info(
    power_group_idx=8,
    eaa=1,
    amp=1,
    rank=MAX_RANK,
    maturity_ts=NOW + 5 * DAY,
    term=45,
)


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def group(root: ET.Element, group_id: str) -> ET.Element:
    for g in root.iter(f"{SVG_NS}g"):
        if g.get("id") == group_id:
            return g
    raise AssertionError(f"no <g id={group_id!r}> in SVG")


def texts(root: ET.Element) -> list[str]:
    return [t.text or "" for t in root.iter(f"{SVG_NS}text")]


def strip_decoration(svg: str) -> str:
    """Serialize the SVG without its random decoration layer."""
    root = parse(svg)
    root.remove(group(root, "decoration"))
    return ET.tostring(root, encoding="unicode")


@pytest.fixture
def apex_data() -> ChainTokenData:
    return ChainTokenData(vmu_count=128, packed_mint_info=APEX_PACKED, xen_burned=15_000_000, is_apex=True)


@pytest.fixture
def limited_data() -> ChainTokenData:
    return ChainTokenData(vmu_count=40, packed_mint_info=str(LIMITED_PACKED), xen_burned=0)


@pytest.fixture
def common_data() -> ChainTokenData:
    return ChainTokenData(vmu_count=0, packed_mint_info=hex(COMMON_PACKED), xen_burned=500)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
