#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Typed catalog records and the immutable catalog snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple

from skincdn.indexers.localization import LocalizationTable

SIDES = frozenset({"terrorists", "counter-terrorists"})

_EMPTY: Mapping[str, Tuple[str, ...]] = MappingProxyType({})


def normalize_tag(tag: Any) -> str:
    """'#SFUI_WPNHUD_AWP' -> 'sfui_wpnhud_awp'."""
    s = str(tag or "").strip()
    if s.startswith("#"):
        s = s[1:]
    return s.lower()


@dataclass(frozen=True)
class Item:
    key: str
    name: str
    name_tag: str
    image_inventory: Optional[str] = None
    prefab: Optional[str] = None
    used_by_classes: FrozenSet[str] = frozenset()

    @property
    def is_playable(self) -> bool:
        return bool(self.used_by_classes & SIDES)


@dataclass(frozen=True)
class Prefab:
    key: str
    name_tag: str
    item_class: Optional[str] = None
    used_by_classes: FrozenSet[str] = frozenset()
    image_inventory: Optional[str] = None

    @property
    def is_playable(self) -> bool:
        return bool(self.used_by_classes & SIDES)


@dataclass(frozen=True)
class PaintKit:
    key: str
    name: str
    description_tag: str

    @property
    def id(self) -> Optional[int]:
        try:
            return int(self.key)
        except ValueError:
            return None


@dataclass(frozen=True)
class StickerKit:
    key: str
    name: str
    name_tag: str
    sticker_material: Optional[str] = None
    patch_material: Optional[str] = None

    @property
    def looks_like_graffiti(self) -> bool:
        return "graffiti" in self.name.lower()


@dataclass(frozen=True)
class MusicDefinition:
    key: str
    name: str
    name_tag: str
    image_inventory: Optional[str] = None


@dataclass(frozen=True)
class CatalogSnapshot:
    """One immutable view over items_game + localization + CDN manifest.

    Section mappings keep catalog declaration order. The *_by_* indexes map a
    normalized tag to the keys of every record carrying it, in the same order.
    """

    items: Mapping[str, Item]
    prefabs: Mapping[str, Prefab]
    paint_kits: Mapping[str, PaintKit]
    sticker_kits: Mapping[str, StickerKit]
    music_definitions: Mapping[str, MusicDefinition]
    localization: LocalizationTable
    cdn_manifest: Mapping[str, str]
    meta: Mapping[str, Any] = field(default_factory=dict)

    items_by_tag: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    items_by_prefab: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    prefabs_by_tag: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    paint_kits_by_description: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    sticker_kits_by_tag: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    music_by_tag: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)

    # ----------------- lookups -----------------
    def items_with_tag(self, tag: str) -> Iterator[Item]:
        for key in self.items_by_tag.get(normalize_tag(tag), ()):
            yield self.items[key]

    def items_with_prefab(self, prefab_key: str) -> Iterator[Item]:
        for key in self.items_by_prefab.get(prefab_key, ()):
            yield self.items[key]

    def prefabs_with_tag(self, tag: str) -> Iterator[Prefab]:
        for key in self.prefabs_by_tag.get(normalize_tag(tag), ()):
            yield self.prefabs[key]

    def paint_kits_with_description(self, tag: str) -> Iterator[PaintKit]:
        for key in self.paint_kits_by_description.get(normalize_tag(tag), ()):
            yield self.paint_kits[key]

    def sticker_kits_with_tag(self, tag: str) -> Iterator[StickerKit]:
        for key in self.sticker_kits_by_tag.get(normalize_tag(tag), ()):
            yield self.sticker_kits[key]

    def music_with_tag(self, tag: str) -> Iterator[MusicDefinition]:
        for key in self.music_by_tag.get(normalize_tag(tag), ()):
            yield self.music_definitions[key]

    def manifest_url(self, key: str) -> Optional[str]:
        return self.cdn_manifest.get(str(key or "").lower())

    def stats(self) -> Dict[str, int]:
        return {
            "items": len(self.items),
            "prefabs": len(self.prefabs),
            "paint_kits": len(self.paint_kits),
            "sticker_kits": len(self.sticker_kits),
            "music_definitions": len(self.music_definitions),
            "localization_tokens": len(self.localization),
            "localization_strings": self.localization.distinct_strings(),
            "localization_collisions": self.localization.collision_count(),
            "cdn_manifest": len(self.cdn_manifest),
        }
