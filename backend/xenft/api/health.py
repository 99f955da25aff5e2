"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from xenft import __version__
from xenft.config import Settings
from xenft.dependencies import get_settings
from xenft.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, env=settings.xenft_env, chain_id=settings.chain_id)
