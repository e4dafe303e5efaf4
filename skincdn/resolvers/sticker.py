# -*- coding: utf-8 -*-
"""Sticker / patch / graffiti resolution.

All three share the sticker_kits table; the kind decides which material field
is used and how localization collisions between kits are ordered.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from skincdn.classify import ItemKind
from skincdn.icons import IconService
from skincdn.resolvers.base import ResolvedAsset
from skincdn.schemas.catalog import CatalogSnapshot, StickerKit

logger = logging.getLogger(__name__)

_NAME_RES: Dict[ItemKind, "re.Pattern[str]"] = {
    ItemKind.STICKER: re.compile(r"^Sticker \| (.+)$"),
    ItemKind.PATCH: re.compile(r"^Patch \| (.+)$"),
    # trailing "(Tracer Yellow)" is the tint, not part of the name
    ItemKind.GRAFFITI: re.compile(r"^Sealed Graffiti \| ([^(]+)"),
}

# asset category searched for each kind
_CATEGORY = {
    ItemKind.STICKER: "stickers",
    ItemKind.GRAFFITI: "stickers",
    ItemKind.PATCH: "patches",
}


def extract_sticker_name(display_name: str, kind: ItemKind) -> Optional[str]:
    pattern = _NAME_RES.get(kind)
    if pattern is None:
        return None
    m = pattern.match((display_name or "").strip())
    if not m:
        return None
    name = m.group(1).strip()
    return name or None


def material_for(kit: StickerKit, kind: ItemKind) -> Optional[str]:
    if kind == ItemKind.PATCH:
        return kit.patch_material
    return kit.sticker_material


def order_kits(kits: List[StickerKit], kind: ItemKind) -> List[StickerKit]:
    """Stable tie-break between kits sharing one localization token.

    Graffiti requests try kits named '*graffiti*' first, sticker requests try
    them last; patches keep catalog order.
    """
    if len(kits) < 2 or kind == ItemKind.PATCH:
        return list(kits)
    graffiti = [k for k in kits if k.looks_like_graffiti]
    others = [k for k in kits if not k.looks_like_graffiti]
    if kind == ItemKind.GRAFFITI:
        return graffiti + others
    return others + graffiti


def resolve_sticker_like(
    snapshot: CatalogSnapshot,
    icons: IconService,
    display_name: str,
    kind: ItemKind,
    large: bool = True,
) -> Optional[ResolvedAsset]:
    category = _CATEGORY.get(kind)
    name = extract_sticker_name(display_name, kind)
    if category is None or name is None:
        return None

    for token in snapshot.localization.candidates(name):
        kits = order_kits(list(snapshot.sticker_kits_with_tag(token)), kind)
        for kit in kits:
            material = material_for(kit, kind)
            if not material:
                continue
            hit = icons.locate_file(category, material, large)
            if hit:
                return ResolvedAsset(kind, hit[0], hit[1])

    logger.debug("No %s asset for %r", kind.value, display_name)
    return None
