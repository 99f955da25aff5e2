"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from xenft.api import decode, gallery, health, render, scheme

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(scheme.router)
api_router.include_router(decode.router)
api_router.include_router(render.router)
api_router.include_router(gallery.router)
