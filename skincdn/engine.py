#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""ItemImageResolver (core)

This module is intentionally UI-agnostic.

Responsibilities
- Hold one immutable CatalogSnapshot plus the asset index built for it.
- Classify display names and dispatch to the per-kind resolvers.
- Provide the low-level lookups for callers that already hold canonical
  identifiers (sticker material, patch material, status icon, def index).

Design notes
- No method raises on unknown or ambiguous input; misses are None.
- Nothing here mutates after __init__, so one resolver serves any number of
  threads. Catalog refresh builds a new resolver (see skincdn.store).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from skincdn.assets import AssetIndex, AssetSource
from skincdn.classify import ClassifiedName, ItemKind, PhaseTag, classify
from skincdn.icons import IconService
from skincdn.paths import Hasher, PathBuilder
from skincdn.resolvers import (
    ResolvedAsset,
    resolve_generic,
    resolve_music_kit,
    resolve_sticker_like,
    resolve_weapon,
    resolve_weapon_by_index,
)
from skincdn.schemas.catalog import CatalogSnapshot
from skincdn.settings import ResolverSettings

logger = logging.getLogger(__name__)

PhaseLike = Union[PhaseTag, str, None]


class ItemImageResolver:
    """Main entry used by CLI / web API / library callers.

    Parameters
    - snapshot: normalized catalog (skincdn.catalog.normalize).
    - assets: byte source keyed by resource path, or a prebuilt AssetIndex.
    - settings: CDN base URL, sticker size, enabled asset categories.
    - hasher: content hash used in URLs (default SHA-1 hex).
    """

    def __init__(
        self,
        snapshot: CatalogSnapshot,
        assets: Union[AssetSource, AssetIndex],
        settings: Optional[ResolverSettings] = None,
        *,
        hasher: Optional[Hasher] = None,
    ):
        self.snapshot = snapshot
        if isinstance(assets, AssetIndex):
            self.settings = settings or assets.settings
            self.assets = assets
        else:
            self.settings = settings or ResolverSettings()
            self.assets = AssetIndex(assets, self.settings)
        self.builder = PathBuilder(self.settings.normalized_base_url(), hasher=hasher)
        self.icons = IconService(self.assets, self.builder)

    # --------------------------------------------------------
    # Display-name resolution
    # --------------------------------------------------------

    def classify(self, display_name: str) -> ClassifiedName:
        return classify(display_name, self.snapshot)

    def resolve_item_image(self, display_name: str, phase: PhaseLike = None) -> Optional[ResolvedAsset]:
        try:
            phase_tag = PhaseTag.coerce(phase)
        except ValueError:
            logger.debug("Ignoring lookup with unknown phase %r", phase)
            return None

        cls = self.classify(display_name)
        large = bool(self.settings.large_stickers)

        if cls.kind == ItemKind.WEAPON:
            return resolve_weapon(self.snapshot, cls.stripped_name, phase_tag)
        if cls.kind == ItemKind.MUSIC_KIT:
            return resolve_music_kit(self.snapshot, self.icons, cls.stripped_name)
        if cls.kind in (ItemKind.STICKER, ItemKind.GRAFFITI, ItemKind.PATCH):
            return resolve_sticker_like(self.snapshot, self.icons, cls.original_name, cls.kind, large)
        return resolve_generic(self.snapshot, self.icons, cls.original_name)

    def resolve_item_image_url(self, display_name: str, phase: PhaseLike = None) -> Optional[str]:
        hit = self.resolve_item_image(display_name, phase)
        return hit.url if hit else None

    # --------------------------------------------------------
    # Canonical-identifier lookups
    # --------------------------------------------------------

    def get_sticker_url(self, sticker_name: str, large: bool = False) -> Optional[str]:
        """URL for a sticker_material value, e.g. 'cologne2016/nv'."""
        return self.icons.sticker_url(sticker_name, large)

    def get_patch_url(self, patch_name: str, large: bool = False) -> Optional[str]:
        """URL for a patch_material value."""
        return self.icons.patch_url(patch_name, large)

    def get_status_icon_url(self, icon_name: str, large: bool = False) -> Optional[str]:
        return self.icons.status_icon_url(icon_name, large)

    def get_weapon_url(self, def_index: Any, paint_index: Any = None) -> Optional[str]:
        hit = resolve_weapon_by_index(self.snapshot, def_index, paint_index)
        return hit.url if hit else None

    # --------------------------------------------------------
    # Introspection
    # --------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        return {
            "catalog": self.snapshot.stats(),
            "assets": self.assets.count_by_category(),
            "settings": self.settings.to_public_dict(),
        }
