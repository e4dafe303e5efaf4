# -*- coding: utf-8 -*-
"""Locate and load the parsed data dumps used by the CLI and web API.

Expected files (JSON, already converted from the game's text formats):
- items_game.json      : {"items_game": {"items": ..., "prefabs": ..., ...}}
- csgo_english.json    : {"lang": {"Language": "English", "Tokens": {...}}}
- items_game_cdn.json  : {"weapon_awp_cu_awp_redline": "https://...png", ...}
- assets/              : extracted "resource/flash/..." tree
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from skincdn.assets import DirectoryAssetSource, MemoryAssetSource
from skincdn.settings import ResolverSettings
from skincdn.store import ResolverStore

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Parse one JSON file; missing files raise FileNotFoundError."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def file_sig(path: Optional[Path]) -> Optional[Dict[str, Any]]:
    if path is None or not path.exists():
        return None
    st = path.stat()
    return {"path": str(path), "size": int(st.st_size), "mtime": float(st.st_mtime)}


@dataclass(frozen=True)
class DataPaths:
    items_game: Path
    localization: Path
    cdn_manifest: Optional[Path] = None
    asset_root: Optional[Path] = None

    @classmethod
    def from_config(
        cls,
        cfg: Optional[Any],
        *,
        items_game: Optional[Path] = None,
        localization: Optional[Path] = None,
        cdn_manifest: Optional[Path] = None,
        asset_root: Optional[Path] = None,
    ) -> "DataPaths":
        """Explicit arguments win over conf/settings.ini [PATHS]."""

        def pick(explicit: Optional[Path], key: str) -> Optional[Path]:
            if explicit:
                return Path(explicit).expanduser()
            if cfg is None:
                return None
            return cfg.get_path("PATHS", key)

        ig = pick(items_game, "ITEMS_GAME")
        loc = pick(localization, "LOCALIZATION")
        if ig is None or loc is None:
            raise FileNotFoundError("items_game and localization paths are required (flags or conf/settings.ini)")
        return cls(
            items_game=ig,
            localization=loc,
            cdn_manifest=pick(cdn_manifest, "CDN_MANIFEST"),
            asset_root=pick(asset_root, "ASSET_ROOT"),
        )

    def sources(self) -> Dict[str, Any]:
        return {
            "items_game": file_sig(self.items_game),
            "localization": file_sig(self.localization),
            "cdn_manifest": file_sig(self.cdn_manifest),
            "asset_root": str(self.asset_root) if self.asset_root else None,
        }


def load_store(paths: DataPaths, settings: Optional[ResolverSettings] = None, store: Optional[ResolverStore] = None) -> ResolverStore:
    """Read the dumps and publish a resolver into `store` (a new one by default)."""

    store = store or ResolverStore(settings)
    items_game = read_json(paths.items_game)
    localization = read_json(paths.localization)

    manifest = None
    if paths.cdn_manifest is not None and paths.cdn_manifest.exists():
        manifest = read_json(paths.cdn_manifest)
    else:
        logger.warning("No CDN manifest at %s; weapon lookups will miss", paths.cdn_manifest)

    if paths.asset_root is not None and paths.asset_root.is_dir():
        assets = DirectoryAssetSource(paths.asset_root)
    else:
        logger.warning("No asset folder at %s; icon lookups will miss", paths.asset_root)
        assets = MemoryAssetSource()

    store.refresh(
        items_game,
        localization,
        assets=assets,
        cdn_manifest=manifest,
        sources=paths.sources(),
    )
    return store
