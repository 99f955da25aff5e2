"""Gallery — JSON file of saved renders keyed by token id.

Each entry is a snapshot of a rendered card:
    {tokenId, vmuCount, term, xenBurned, svg, category, rarity, savedAt}
Saving an existing token id overwrites it in place (last write wins).
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from xenft.engine.pipeline import RenderResult

logger = logging.getLogger(__name__)

GALLERY_FILE = "gallery.json"


@dataclass
class GalleryEntry:
    """One saved card, serialized with camelCase keys."""

    tokenId: int
    vmuCount: int
    term: int
    xenBurned: int
    svg: str
    category: str
    rarity: str
    savedAt: str = ""

    @classmethod
    def from_render(cls, result: RenderResult, saved_at: datetime | None = None) -> GalleryEntry:
        if result.asset is None or result.token_id is None:
            raise ValueError("cannot save a render without a token")
        saved_at = saved_at or datetime.now(timezone.utc)
        return cls(
            tokenId=result.token_id,
            vmuCount=result.asset.vmu_count,
            term=result.asset.mint_info.term,
            xenBurned=result.asset.xen_burned,
            svg=result.svg,
            category=result.rarity.category.value,
            rarity=result.rarity.rarity,
            savedAt=saved_at.isoformat(),
        )


class GalleryStore:
    """JSON-backed gallery of saved XENFT renders."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.gallery_file = self.data_dir / GALLERY_FILE

    def save(self, entry: GalleryEntry) -> bool:
        """Add or replace the entry for ``entry.tokenId``."""
        if not entry.savedAt:
            entry.savedAt = datetime.now(timezone.utc).isoformat()
        entries = self._load()

        for i, existing in enumerate(entries):
            if existing.tokenId == entry.tokenId:
                entries[i] = entry
                break
        else:
            entries.append(entry)

        try:
            self._save(entries)
        except OSError as e:
            logger.error("Failed to save XENFT #%s to gallery: %s", entry.tokenId, e)
            return False
        logger.info("Saved XENFT #%s to gallery", entry.tokenId)
        return True

    def all(self) -> list[GalleryEntry]:
        return self._load()

    def get(self, token_id: int) -> GalleryEntry | None:
        for entry in self._load():
            if entry.tokenId == token_id:
                return entry
        return None

    def remove(self, token_id: int) -> bool:
        """Drop ``token_id``. Returns False if it was not saved."""
        entries = self._load()
        remaining = [e for e in entries if e.tokenId != token_id]
        if len(remaining) == len(entries):
            return False
        try:
            self._save(remaining)
        except OSError as e:
            logger.error("Failed to remove XENFT #%s from gallery: %s", token_id, e)
            return False
        logger.info("Removed XENFT #%s from gallery", token_id)
        return True

    def _load(self) -> list[GalleryEntry]:
        if not self.gallery_file.exists():
            return []
        try:
            with open(self.gallery_file, encoding="utf-8") as f:
                data: Any = json.load(f)
            return [GalleryEntry(**item) for item in data]
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Gallery file %s unreadable, treating as empty: %s", self.gallery_file, e)
            return []

    def _save(self, entries: list[GalleryEntry]) -> None:
        with open(self.gallery_file, "w", encoding="utf-8") as f:
            json.dump([asdict(e) for e in entries], f, indent=2, ensure_ascii=False)


_store: GalleryStore | None = None


def get_gallery_store() -> GalleryStore:
    """Get or create the process-wide GalleryStore for the configured directory."""
    global _store
    if _store is None:
        from xenft.config import settings

        _store = GalleryStore(settings.gallery_dir)
    return _store
