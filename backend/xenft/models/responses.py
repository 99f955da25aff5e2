"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    chain_id: int = 8453


class SchemeResponse(BaseModel):
    primary: str
    secondary: str
    tertiary: str
    background: str
    cycle_index: int
    cycle_label: str
    days_until_next_cycle: int


class DecodeResponse(BaseModel):
    redeemed: bool = False
    is_apex: bool = False
    is_limited: bool = False
    power_group_idx: int = 0
    eaa: int = 0
    amp: int = 0
    rank: str = "0"
    maturity_ts: int = 0
    term: int = 0
    error: str = ""


class RenderResponse(BaseModel):
    token_id: int | None = None
    svg: str
    category: str
    rarity: str
    rarity_color: str
    cycle_index: int
    days_until_next_cycle: int
    error: str = ""


class GalleryItem(BaseModel):
    tokenId: int
    vmuCount: int
    term: int
    xenBurned: int
    svg: str
    category: str
    rarity: str
    savedAt: str


class GalleryListResponse(BaseModel):
    items: list[GalleryItem]
    count: int = 0
