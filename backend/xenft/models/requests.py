"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from xenft.config import settings
from xenft.models.chain import ChainTokenData


class DecodeRequest(BaseModel):
    packed_mint_info: int | str = Field(
        ...,
        alias="packedMintInfo",
        description="Packed uint256 mintInfo as an integer, decimal string or 0x hex string",
    )

    model_config = {"populate_by_name": True}


class RenderRequest(ChainTokenData):
    token_id: int | None = Field(None, alias="tokenId", description="XENFT token id")
    now: int | None = Field(
        None,
        description="Render as of this Unix timestamp (seconds); defaults to the current time",
    )
    seed: int | None = Field(None, description="Seed for the decoration layer")


class PngRequest(RenderRequest):
    width: int = Field(settings.png_default_size, gt=0, le=4096)
    height: int = Field(settings.png_default_size, gt=0, le=4096)


class OwnedRenderRequest(BaseModel):
    now: int | None = Field(
        None,
        description="Render as of this Unix timestamp (seconds); defaults to the current time",
    )
    seed: int | None = Field(None, description="Seed for the decoration layer")
