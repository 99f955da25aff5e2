"""FastAPI dependency injection."""

from __future__ import annotations

from xenft.chain.session import ChainSession
from xenft.config import Settings, settings
from xenft.gallery.store import GalleryStore, get_gallery_store as _gallery_store


def get_settings() -> Settings:
    return settings


def get_gallery_store() -> GalleryStore:
    return _gallery_store()


def get_chain_session() -> ChainSession | None:
    """No chain reader is wired into the server; override to attach a connected session."""
    return None
