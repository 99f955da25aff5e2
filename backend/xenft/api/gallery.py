"""/api/gallery — saved renders keyed by token id."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from xenft.api.render import run_render
from xenft.dependencies import get_gallery_store
from xenft.gallery.store import GalleryEntry, GalleryStore
from xenft.models.requests import RenderRequest
from xenft.models.responses import GalleryItem, GalleryListResponse

router = APIRouter(prefix="/gallery")


@router.get("", response_model=GalleryListResponse)
async def list_gallery(store: GalleryStore = Depends(get_gallery_store)) -> GalleryListResponse:
    items = [GalleryItem(**asdict(e)) for e in store.all()]
    return GalleryListResponse(items=items, count=len(items))


@router.post("", response_model=GalleryItem)
async def save_to_gallery(
    req: RenderRequest,
    store: GalleryStore = Depends(get_gallery_store),
) -> GalleryItem:
    if req.token_id is None or req.token_id <= 0:
        raise HTTPException(status_code=422, detail="tokenId must be a positive integer")
    entry = GalleryEntry.from_render(run_render(req))
    if not store.save(entry):
        raise HTTPException(status_code=500, detail=f"Failed to save XENFT #{req.token_id}")
    return GalleryItem(**asdict(entry))


@router.get("/{token_id}", response_model=GalleryItem)
async def get_gallery_item(
    token_id: int,
    store: GalleryStore = Depends(get_gallery_store),
) -> GalleryItem:
    entry = store.get(token_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"XENFT #{token_id} is not in the gallery")
    return GalleryItem(**asdict(entry))


@router.delete("/{token_id}")
async def remove_from_gallery(
    token_id: int,
    store: GalleryStore = Depends(get_gallery_store),
) -> dict[str, bool]:
    if not store.remove(token_id):
        raise HTTPException(status_code=404, detail=f"XENFT #{token_id} is not in the gallery")
    return {"removed": True}
