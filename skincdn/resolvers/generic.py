# -*- coding: utf-8 -*-
"""Everything else: cases, keys, passes, tools...

The display name is looked up case-insensitively. Every item carrying the
token is tried in catalog order, then every prefab (case keys only have an
image at prefab level).
"""

from __future__ import annotations

from typing import Iterator, Optional

from skincdn.classify import ItemKind
from skincdn.icons import IconService, inventory_resource_path
from skincdn.resolvers.base import ResolvedAsset
from skincdn.schemas.catalog import CatalogSnapshot


def _image_candidates(snapshot: CatalogSnapshot, token: str) -> Iterator[str]:
    for item in snapshot.items_with_tag(token):
        if item.image_inventory:
            yield item.image_inventory
    for prefab in snapshot.prefabs_with_tag(token):
        if prefab.image_inventory:
            yield prefab.image_inventory


def resolve_generic(snapshot: CatalogSnapshot, icons: IconService, display_name: str) -> Optional[ResolvedAsset]:
    for token in snapshot.localization.candidates(display_name, ignore_case=True):
        for image in _image_candidates(snapshot, token):
            hit = icons.locate(inventory_resource_path(image))
            if hit:
                return ResolvedAsset(ItemKind.GENERIC, hit[0], hit[1])
    return None
