"""Boundary model for values read from the XENFT contract."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChainTokenData(BaseModel):
    """Raw per-token reads. ``packed_mint_info`` is decoded later, never here."""

    model_config = {"populate_by_name": True, "frozen": True}

    vmu_count: int = Field(0, ge=0, alias="vmuCount")
    packed_mint_info: int | str = Field(0, alias="packedMintInfo")
    xen_burned: int = Field(0, ge=0, alias="xenBurned")
    is_apex: bool = Field(False, alias="isApex")
