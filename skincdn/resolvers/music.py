# -*- coding: utf-8 -*-
"""Music kit resolution."""

from __future__ import annotations

import re
from typing import Optional

from skincdn.classify import ItemKind
from skincdn.icons import IconService, inventory_resource_path
from skincdn.resolvers.base import ResolvedAsset
from skincdn.schemas.catalog import CatalogSnapshot

_MUSIC_KIT_RE = re.compile(r"^Music Kit \| (.+)$")


def resolve_music_kit(snapshot: CatalogSnapshot, icons: IconService, display_name: str) -> Optional[ResolvedAsset]:
    """'Music Kit | Noisia, Sharpened' -> econ/music_kits/... icon.

    Expects the decorated prefixes (StatTrak™) to be stripped already.
    """
    m = _MUSIC_KIT_RE.match((display_name or "").strip())
    if not m:
        return None

    for token in snapshot.localization.candidates(m.group(1).strip()):
        for kit in snapshot.music_with_tag(token):
            if not kit.image_inventory:
                continue
            hit = icons.locate(inventory_resource_path(kit.image_inventory))
            if hit:
                return ResolvedAsset(ItemKind.MUSIC_KIT, hit[0], hit[1])
    return None
