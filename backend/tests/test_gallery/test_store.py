"""Tests for the JSON gallery store."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from tests.conftest import NOW

from xenft.engine.pipeline import render_token
from xenft.gallery.store import GALLERY_FILE, GalleryEntry, GalleryStore
from xenft.models.chain import ChainTokenData


@pytest.fixture
def store(tmp_path) -> GalleryStore:
    return GalleryStore(tmp_path)


def _entry(token_id: int, rarity: str = "Basic") -> GalleryEntry:
    return GalleryEntry(
        tokenId=token_id, vmuCount=1, term=10, xenBurned=0,
        svg="<svg/>", category="Common", rarity=rarity,
    )


def test_empty(store):
    assert store.all() == []
    assert store.get(1) is None


def test_save_and_get(store):
    assert store.save(_entry(1))
    saved = store.get(1)
    assert saved.rarity == "Basic"
    assert saved.savedAt


def test_last_write_wins_in_place(store):
    store.save(_entry(1))
    store.save(_entry(2))
    store.save(_entry(1, rarity="Standard"))
    entries = store.all()
    assert [e.tokenId for e in entries] == [1, 2]
    assert entries[0].rarity == "Standard"


def test_remove(store):
    store.save(_entry(1))
    assert store.remove(1)
    assert not store.remove(1)
    assert store.all() == []


def test_record_format(store, tmp_path):
    store.save(_entry(5))
    data = json.loads((tmp_path / GALLERY_FILE).read_text(encoding="utf-8"))
    assert set(data[0]) == {"tokenId", "vmuCount", "term", "xenBurned", "svg", "category", "rarity", "savedAt"}


def test_corrupt_file_reads_empty(store, tmp_path):
    (tmp_path / GALLERY_FILE).write_text("{not json", encoding="utf-8")
    assert store.all() == []
    assert store.save(_entry(3))
    assert [e.tokenId for e in store.all()] == [3]


def test_from_render(apex_data):
    result = render_token(21, apex_data, now=NOW)
    saved_at = datetime(2024, 1, 2, tzinfo=timezone.utc)
    entry = GalleryEntry.from_render(result, saved_at)
    assert entry.tokenId == 21
    assert entry.vmuCount == 128
    assert entry.term == 365
    assert entry.xenBurned == 15_000_000
    assert entry.category == "Apex"
    assert entry.rarity == "Xunicorn"
    assert entry.savedAt == "2024-01-02T00:00:00+00:00"
    assert entry.svg == result.svg


def test_from_render_rejects_tokenless_result():
    bad = render_token(None, ChainTokenData(), now=NOW)
    with pytest.raises(ValueError):
        GalleryEntry.from_render(bad)
