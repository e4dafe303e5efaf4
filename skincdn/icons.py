# -*- coding: utf-8 -*-
"""Icon lookup: asset index + path builder.

Every method returns None when the file is not indexed (missing, or in a
disabled category) or its bytes cannot be retrieved.
"""

from __future__ import annotations

from typing import Optional, Tuple

from skincdn.assets import AssetIndex, normalize_path
from skincdn.paths import PathBuilder
from skincdn.settings import ResolverSettings


def icon_file_name(name: str, large: bool) -> str:
    """'cologne2016/nv' -> 'cologne2016/nv_large.png' (or 'cologne2016/nv.png')."""
    base = normalize_path(name)
    if base.lower().endswith(".png"):
        base = base[: -len(".png")]
    return f"{base}_large.png" if large else f"{base}.png"


def inventory_resource_path(image_inventory: str) -> str:
    """'econ/music_kits/valve_01' -> 'resource/flash/econ/music_kits/valve_01.png'."""
    return f"resource/flash/{normalize_path(image_inventory)}.png"


class IconService:
    """Icon URL helper.

    The service holds no mutable state after construction and is safe for
    concurrent requests.
    """

    def __init__(self, assets: AssetIndex, builder: Optional[PathBuilder] = None):
        self.assets = assets
        settings: ResolverSettings = assets.settings
        self.builder = builder or PathBuilder(settings.normalized_base_url())

    def locate(self, path: str) -> Optional[Tuple[str, str]]:
        """(resource_path, url) for an indexed path with readable bytes."""
        p = normalize_path(path)
        if p not in self.assets:
            return None
        url = self.builder.build_url(p, self.assets.read(p))
        if url is None:
            return None
        return p, url

    def path_url(self, path: str) -> Optional[str]:
        hit = self.locate(path)
        return hit[1] if hit else None

    def locate_file(self, category: str, name: str, large: bool) -> Optional[Tuple[str, str]]:
        path = self.assets.find(category, icon_file_name(name, large))
        if path is None:
            return None
        return self.locate(path)

    def sticker_url(self, name: str, large: bool = False) -> Optional[str]:
        hit = self.locate_file("stickers", name, large)
        return hit[1] if hit else None

    def patch_url(self, name: str, large: bool = False) -> Optional[str]:
        hit = self.locate_file("patches", name, large)
        return hit[1] if hit else None

    def status_icon_url(self, name: str, large: bool = False) -> Optional[str]:
        hit = self.locate_file("status_icons", name, large)
        return hit[1] if hit else None
