# -*- coding: utf-8 -*-
"""Typed catalog records."""

from skincdn.schemas.catalog import (
    SIDES,
    CatalogSnapshot,
    Item,
    MusicDefinition,
    PaintKit,
    Prefab,
    StickerKit,
    normalize_tag,
)
from skincdn.schemas.meta import build_meta, now_iso

__all__ = [
    "SIDES",
    "CatalogSnapshot",
    "Item",
    "MusicDefinition",
    "PaintKit",
    "Prefab",
    "StickerKit",
    "build_meta",
    "normalize_tag",
    "now_iso",
]
