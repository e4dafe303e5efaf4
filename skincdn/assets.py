# -*- coding: utf-8 -*-
"""Asset byte sources and the category-gated asset index.

Paths always use the game's resource namespace, e.g.
"resource/flash/econ/stickers/cologne2016/nv_large.png".
"""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Protocol

from skincdn.settings import ASSET_CATEGORIES, ResolverSettings

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    return (path or "").replace("\\", "/").lstrip("/").strip()


class AssetSource(Protocol):
    """Byte-retrieval capability keyed by resource path."""

    def paths(self) -> Iterable[str]:
        ...

    def read(self, path: str) -> Optional[bytes]:
        ...


class MemoryAssetSource:
    """Assets held in a dict (tests, pre-fetched bundles)."""

    def __init__(self, files: Optional[Mapping[str, bytes]] = None):
        self._files: Dict[str, bytes] = {normalize_path(k): bytes(v) for k, v in (files or {}).items()}

    def paths(self) -> Iterable[str]:
        return list(self._files)

    def read(self, path: str) -> Optional[bytes]:
        return self._files.get(normalize_path(path))


class DirectoryAssetSource:
    """Assets extracted to disk, mirroring the resource tree under `root`."""

    def __init__(self, root: Path):
        self.root = Path(root).expanduser()

    def paths(self) -> Iterable[str]:
        if not self.root.is_dir():
            return []
        out: List[str] = []
        base = str(self.root)
        for cur, _, files in os.walk(base):
            for name in files:
                full = os.path.join(cur, name)
                out.append(os.path.relpath(full, base).replace("\\", "/"))
        return out

    def read(self, path: str) -> Optional[bytes]:
        p = self.root / normalize_path(path)
        if not p.is_file():
            return None
        return p.read_bytes()


class AssetIndex:
    """Listing of the enabled asset categories, with basename lookup.

    Built once per source. Paths outside every enabled category are dropped,
    so a disabled category behaves exactly like missing files.
    """

    def __init__(self, source: AssetSource, settings: Optional[ResolverSettings] = None):
        self.source = source
        self.settings = settings or ResolverSettings()
        self._prefixes = self.settings.enabled_prefixes()
        self._disabled = {k: v for k, v in ASSET_CATEGORIES.items() if k not in self._prefixes}
        self._paths: Dict[str, str] = {}
        self._basename_index: Dict[str, List[str]] = {}
        self._build()

    def _build(self) -> None:
        for raw in self.source.paths():
            p = normalize_path(raw)
            cat = self.category_of(p)
            if cat is None:
                continue
            self._paths[p] = cat
            self._basename_index.setdefault(posixpath.basename(p).lower(), []).append(p)
        logger.debug("Indexed %d asset paths in %d categories", len(self._paths), len(self._prefixes))

    def category_of(self, path: str) -> Optional[str]:
        """Most specific enabled category containing `path`, or None.

        A path under a disabled category is None even if a broader enabled
        category also contains it (graffiti lives inside the sticker tree).
        """
        p = normalize_path(path)
        best: Optional[str] = None
        best_len = -1
        for name, prefix in list(self._prefixes.items()) + list(self._disabled.items()):
            if (p == prefix or p.startswith(prefix + "/")) and len(prefix) > best_len:
                best, best_len = name, len(prefix)
        if best is None or best in self._disabled:
            return None
        return best

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._paths

    def count_by_category(self) -> Dict[str, int]:
        out: Dict[str, int] = {k: 0 for k in self._prefixes}
        for cat in self._paths.values():
            out[cat] = out.get(cat, 0) + 1
        return out

    def find(self, category: str, file_name: str) -> Optional[str]:
        """First indexed path in `category` ending with '/<file_name>'.

        `file_name` may carry sub-directories ("cologne2016/nv_large.png").
        Indexed paths are already in an enabled category of their own, so
        graffiti is found through "stickers" even with that category off.
        """
        rel = normalize_path(file_name)
        if not rel:
            return None
        prefix = ASSET_CATEGORIES.get(category)
        if prefix is None:
            return None
        suffix = "/" + rel.lower()
        for p in self._basename_index.get(posixpath.basename(rel).lower(), []):
            if not p.startswith(prefix + "/"):
                continue
            if p.lower().endswith(suffix):
                return p
        return None

    def read(self, path: str) -> Optional[bytes]:
        """Bytes of an indexed path; retrieval failures count as a miss."""
        p = normalize_path(path)
        if p not in self._paths:
            return None
        try:
            return self.source.read(p)
        except Exception as e:  # external byte store
            logger.debug("Asset read failed for %s: %s", p, e)
            return None
