#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Catalog normalizer.

Turns parsed items_game / localization / CDN manifest trees into one
immutable `CatalogSnapshot`:

- every section is validated once and mapped to typed records
- localization tags are normalized (leading '#' dropped, lowercased)
- the inverted localization index is rebuilt from scratch
- tag -> record indexes are built in catalog declaration order
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple, TypeVar

from skincdn.errors import CatalogIntegrityError
from skincdn.indexers.localization import LocalizationTable
from skincdn.schemas.catalog import (
    CatalogSnapshot,
    Item,
    MusicDefinition,
    PaintKit,
    Prefab,
    StickerKit,
    normalize_tag,
)
from skincdn.schemas.meta import build_meta

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("items", "prefabs", "paint_kits", "sticker_kits", "music_definitions")

_ROOT_KEY = "items_game"
_FALSY = ("", "0", "false", "no")

R = TypeVar("R")


def _clean_str(x: Any) -> Optional[str]:
    if x is None or isinstance(x, (dict, list, tuple)):
        return None
    s = str(x).strip()
    return s or None


def _used_by(raw: Any) -> FrozenSet[str]:
    if not isinstance(raw, Mapping):
        return frozenset()
    out = set()
    for side, flag in raw.items():
        if str(flag).strip().lower() in _FALSY:
            continue
        out.add(str(side).strip().lower())
    return frozenset(out)


def _unwrap_root(raw: Any) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise CatalogIntegrityError("items catalog is not a mapping")
    inner = raw.get(_ROOT_KEY)
    if isinstance(inner, Mapping):
        return inner
    return raw


def _section(root: Mapping[str, Any], name: str) -> Dict[str, Mapping[str, Any]]:
    """Return one catalog section as {key: record}, merging duplicate blocks."""

    if name not in root or root[name] is None:
        raise CatalogIntegrityError(f"catalog section '{name}' is missing", section=name)

    raw = root[name]
    blocks: List[Any]
    if isinstance(raw, Mapping):
        blocks = [raw]
    elif isinstance(raw, (list, tuple)):
        blocks = list(raw)
    else:
        raise CatalogIntegrityError(f"catalog section '{name}' is not a mapping", section=name)

    out: Dict[str, Mapping[str, Any]] = {}
    for block in blocks:
        if not isinstance(block, Mapping):
            raise CatalogIntegrityError(f"catalog section '{name}' has a non-mapping block", section=name)
        for key, rec in block.items():
            if not isinstance(rec, Mapping):
                raise CatalogIntegrityError(
                    f"catalog record '{name}/{key}' is not a mapping",
                    section=name,
                )
            out[str(key)] = rec
    return out


def _index(records: Mapping[str, R], key_fn: Callable[[R], Optional[str]]) -> Mapping[str, Tuple[str, ...]]:
    mp: Dict[str, List[str]] = {}
    for key, rec in records.items():
        k = key_fn(rec)
        if not k:
            continue
        mp.setdefault(k, []).append(key)
    return MappingProxyType({k: tuple(v) for k, v in mp.items()})


def _resolve_item_class(key: str, raw_prefabs: Mapping[str, Mapping[str, Any]]) -> Optional[str]:
    """item_class of a prefab, following its `prefab` parent chain."""

    seen = set()
    cur: Optional[str] = key
    while cur and cur not in seen:
        seen.add(cur)
        rec = raw_prefabs.get(cur)
        if rec is None:
            return None
        cls = _clean_str(rec.get("item_class"))
        if cls:
            return cls
        # a prefab may list several space-separated parents; the first one wins
        parent = _clean_str(rec.get("prefab"))
        cur = parent.split()[0] if parent else None
    return None


def _build_items(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, Item]:
    out: Dict[str, Item] = {}
    for key, rec in raw.items():
        out[key] = Item(
            key=key,
            name=_clean_str(rec.get("name")) or "",
            name_tag=normalize_tag(rec.get("item_name")),
            image_inventory=_clean_str(rec.get("image_inventory")),
            prefab=_clean_str(rec.get("prefab")),
            used_by_classes=_used_by(rec.get("used_by_classes")),
        )
    return out


def _build_prefabs(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, Prefab]:
    out: Dict[str, Prefab] = {}
    for key, rec in raw.items():
        out[key] = Prefab(
            key=key,
            name_tag=normalize_tag(rec.get("item_name")),
            item_class=_resolve_item_class(key, raw),
            used_by_classes=_used_by(rec.get("used_by_classes")),
            image_inventory=_clean_str(rec.get("image_inventory")),
        )
    return out


def _build_paint_kits(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, PaintKit]:
    out: Dict[str, PaintKit] = {}
    for key, rec in raw.items():
        out[key] = PaintKit(
            key=key,
            name=_clean_str(rec.get("name")) or "",
            description_tag=normalize_tag(rec.get("description_tag")),
        )
    return out


def _build_sticker_kits(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, StickerKit]:
    out: Dict[str, StickerKit] = {}
    for key, rec in raw.items():
        out[key] = StickerKit(
            key=key,
            name=_clean_str(rec.get("name")) or "",
            name_tag=normalize_tag(rec.get("item_name")),
            sticker_material=_clean_str(rec.get("sticker_material")),
            patch_material=_clean_str(rec.get("patch_material")),
        )
    return out


def _build_music(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, MusicDefinition]:
    out: Dict[str, MusicDefinition] = {}
    for key, rec in raw.items():
        out[key] = MusicDefinition(
            key=key,
            name=_clean_str(rec.get("name")) or "",
            name_tag=normalize_tag(rec.get("loc_name")),
            image_inventory=_clean_str(rec.get("image_inventory")),
        )
    return out


def _build_manifest(raw: Optional[Mapping[str, Any]]) -> Mapping[str, str]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, Mapping):
        raise CatalogIntegrityError("CDN manifest is not a mapping", section="cdn_manifest")
    out: Dict[str, str] = {}
    for key, val in raw.items():
        url = _clean_str(val)
        k = str(key or "").strip().lower()
        if k and url:
            out[k] = url
    return MappingProxyType(out)


def normalize(
    raw_items_catalog: Mapping[str, Any],
    raw_localization_tree: Mapping[str, Any],
    *,
    cdn_manifest: Optional[Mapping[str, Any]] = None,
    sources: Optional[Dict[str, Any]] = None,
) -> CatalogSnapshot:
    """Build a new immutable snapshot from parsed catalog trees.

    Raises CatalogIntegrityError when a required section is absent or a
    section/record is not a mapping. Nothing else is fatal.
    """

    root = _unwrap_root(raw_items_catalog)
    if not isinstance(raw_localization_tree, Mapping):
        raise CatalogIntegrityError("localization tree is not a mapping", section="localization")

    raw = {name: _section(root, name) for name in REQUIRED_SECTIONS}

    items = _build_items(raw["items"])
    prefabs = _build_prefabs(raw["prefabs"])
    paint_kits = _build_paint_kits(raw["paint_kits"])
    sticker_kits = _build_sticker_kits(raw["sticker_kits"])
    music = _build_music(raw["music_definitions"])

    localization = LocalizationTable.build(raw_localization_tree)
    manifest = _build_manifest(cdn_manifest)

    snapshot = CatalogSnapshot(
        items=MappingProxyType(items),
        prefabs=MappingProxyType(prefabs),
        paint_kits=MappingProxyType(paint_kits),
        sticker_kits=MappingProxyType(sticker_kits),
        music_definitions=MappingProxyType(music),
        localization=localization,
        cdn_manifest=manifest,
        meta=MappingProxyType(build_meta(tool="skincdn.catalog", sources=sources)),
        items_by_tag=_index(items, lambda r: r.name_tag),
        items_by_prefab=_index(items, lambda r: r.prefab),
        prefabs_by_tag=_index(prefabs, lambda r: r.name_tag),
        paint_kits_by_description=_index(paint_kits, lambda r: r.description_tag),
        sticker_kits_by_tag=_index(sticker_kits, lambda r: r.name_tag),
        music_by_tag=_index(music, lambda r: r.name_tag),
    )

    logger.debug("Normalized catalog snapshot: %s", snapshot.stats())
    return snapshot
