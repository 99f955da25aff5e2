"""POST /api/decode — unpack a mintInfo word."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from xenft.engine.decoder import decode_mint_info
from xenft.engine.errors import DecodeError
from xenft.models.mint_info import DecodedMintInfo
from xenft.models.requests import DecodeRequest
from xenft.models.responses import DecodeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(info: DecodedMintInfo, error: str = "") -> DecodeResponse:
    flags = info.class_flags
    return DecodeResponse(
        redeemed=info.redeemed,
        is_apex=flags.is_apex,
        is_limited=flags.is_limited,
        power_group_idx=flags.power_group_idx,
        eaa=info.eaa,
        amp=info.amp,
        rank=info.rank_str,
        maturity_ts=info.maturity_ts,
        term=info.term,
        error=error,
    )


@router.post("/decode", response_model=DecodeResponse)
async def decode(req: DecodeRequest) -> DecodeResponse:
    try:
        return _to_response(decode_mint_info(req.packed_mint_info))
    except DecodeError as e:
        logger.warning("Decode request failed: %s", e)
        return _to_response(DecodedMintInfo(), error=str(e))
