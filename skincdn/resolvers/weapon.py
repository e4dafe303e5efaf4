# -*- coding: utf-8 -*-
"""Weapon / skin resolution against the CDN manifest.

"AWP | Redline (Field-Tested)"
  weapon tokens for "AWP"     -> class "weapon_awp"
  skin tokens for "Redline"   -> paint kits with that description tag
  manifest key                -> "weapon_awp_cu_awp_redline"
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from skincdn.classify import ItemKind, PhaseTag, strip_wear
from skincdn.resolvers.base import ResolvedAsset
from skincdn.schemas.catalog import CatalogSnapshot, PaintKit

logger = logging.getLogger(__name__)


def split_weapon_name(name: str) -> Tuple[str, Optional[str]]:
    """'AWP | Redline (Field-Tested)' -> ('AWP', 'Redline'); '★ Karambit' stays whole."""
    parts = [p.strip() for p in strip_wear(name).split("|", 1)]
    weapon = parts[0]
    skin = parts[1] if len(parts) > 1 and parts[1] else None
    return weapon, skin


def weapon_class_for_token(snapshot: CatalogSnapshot, token: str) -> Optional[str]:
    """Weapon class named by one localization token.

    Prefabs used by a side win; items with the tag are the fallback (special
    knives have no prefab of their own).
    """
    for prefab in snapshot.prefabs_with_tag(token):
        if not prefab.is_playable:
            continue
        if prefab.item_class:
            return prefab.item_class
        for item in snapshot.items_with_prefab(prefab.key):
            if item.name:
                return item.name

    for item in snapshot.items_with_tag(token):
        if item.name:
            return item.name
    return None


def weapon_classes(snapshot: CatalogSnapshot, weapon_name: str) -> Iterator[str]:
    """Candidate weapon classes, one per resolvable token, in token order."""
    for token in snapshot.localization.candidates(weapon_name):
        cls = weapon_class_for_token(snapshot, token)
        if cls:
            yield cls


def matching_paint_kits(snapshot: CatalogSnapshot, skin_token: str, phase: Optional[PhaseTag]) -> List[PaintKit]:
    kits = list(snapshot.paint_kits_with_description(skin_token))
    if phase is not None:
        suffix = phase.suffix.lower()
        kits = [k for k in kits if k.name.lower().endswith(suffix)]
    return kits


def resolve_weapon(
    snapshot: CatalogSnapshot,
    stripped_name: str,
    phase: Optional[PhaseTag] = None,
) -> Optional[ResolvedAsset]:
    weapon_name, skin_name = split_weapon_name(stripped_name)
    if not weapon_name:
        return None

    skin_tokens = snapshot.localization.candidates(skin_name) if skin_name else ()

    for weapon_class in weapon_classes(snapshot, weapon_name):
        if not skin_name:
            # vanilla weapon: only the bare class key
            url = snapshot.manifest_url(weapon_class)
            if url:
                return ResolvedAsset(ItemKind.WEAPON, weapon_class.lower(), url)
            continue

        for skin_token in skin_tokens:
            for kit in matching_paint_kits(snapshot, skin_token, phase):
                key = f"{weapon_class}_{kit.name}".lower()
                url = snapshot.manifest_url(key)
                if url:
                    return ResolvedAsset(ItemKind.WEAPON, key, url)

    logger.debug("No manifest entry for weapon %r (phase=%s)", stripped_name, phase)
    return None


def resolve_weapon_by_index(
    snapshot: CatalogSnapshot,
    def_index: object,
    paint_index: Optional[object] = None,
) -> Optional[ResolvedAsset]:
    """Direct lookup by item def index and paint kit index."""
    item = snapshot.items.get(str(def_index))
    if item is None or not item.name:
        return None

    key = item.name
    if paint_index is not None and str(paint_index) not in ("", "0"):
        kit = snapshot.paint_kits.get(str(paint_index))
        if kit is None or not kit.name:
            return None
        key = f"{item.name}_{kit.name}"

    key = key.lower()
    url = snapshot.manifest_url(key)
    if url is None:
        return None
    return ResolvedAsset(ItemKind.WEAPON, key, url)
