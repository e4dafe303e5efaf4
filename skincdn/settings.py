# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

DEFAULT_CDN_BASE_URL = "https://steamcdn-a.akamaihd.net/apps/730/"

# category -> directory prefix inside the game's resource tree
ASSET_CATEGORIES: Dict[str, str] = {
    "stickers": "resource/flash/econ/stickers",
    "patches": "resource/flash/econ/patches",
    "graffiti": "resource/flash/econ/stickers/default",
    "characters": "resource/flash/econ/characters",
    "music_kits": "resource/flash/econ/music_kits",
    "cases": "resource/flash/econ/weapon_cases",
    "tools": "resource/flash/econ/tools",
    "status_icons": "resource/flash/econ/status_icons",
    "weapons": "resource/flash/econ/default_generated",
}


@dataclass(frozen=True)
class ResolverSettings:
    """Runtime settings for the resolver engine.

    cdn_base_url:
      - public base prepended to rewritten icon paths (trailing slash optional)

    large_stickers:
      - whether display-name resolution of stickers/patches/graffiti asks for
        the "_large" rendition

    categories:
      - enabled asset categories (keys of ASSET_CATEGORIES). Assets under a
        disabled category behave as missing.
    """

    cdn_base_url: str = DEFAULT_CDN_BASE_URL
    large_stickers: bool = True
    categories: FrozenSet[str] = field(default_factory=lambda: frozenset(ASSET_CATEGORIES))

    def normalized_base_url(self) -> str:
        base = (self.cdn_base_url or DEFAULT_CDN_BASE_URL).strip()
        return base if base.endswith("/") else base + "/"

    def enabled_prefixes(self) -> Dict[str, str]:
        return {k: v for k, v in ASSET_CATEGORIES.items() if k in self.categories}

    def to_public_dict(self) -> Dict[str, Any]:
        return {
            "cdn_base_url": self.normalized_base_url(),
            "large_stickers": bool(self.large_stickers),
            "categories": sorted(self.categories),
        }

    @classmethod
    def from_config(cls, cfg: Optional[Any]) -> "ResolverSettings":
        """Build settings from a ConfigLoader; missing keys keep their defaults."""
        if cfg is None:
            return cls()
        base = cfg.get("CDN", "BASE_URL") or DEFAULT_CDN_BASE_URL
        large = cfg.get_bool("CDN", "LARGE_STICKERS", True)
        enabled = {name for name in ASSET_CATEGORIES if cfg.get_bool("ASSETS", name.upper(), True)}
        return cls(cdn_base_url=base, large_stickers=large, categories=frozenset(enabled))
