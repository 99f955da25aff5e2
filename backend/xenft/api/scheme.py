"""GET /api/scheme — color cycle currently in effect."""

from __future__ import annotations

from fastapi import APIRouter, Query

from xenft.engine.color_cycle import current_scheme
from xenft.models.responses import SchemeResponse

router = APIRouter()


@router.get("/scheme", response_model=SchemeResponse)
async def scheme(now: int | None = Query(None, description="Unix timestamp (seconds)")) -> SchemeResponse:
    return SchemeResponse(**current_scheme(now).to_dict())
