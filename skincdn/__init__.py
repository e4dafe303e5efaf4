# -*- coding: utf-8 -*-
"""skincdn: resolve item display names to content-addressed CDN image URLs.

- Catalog: items_game + localization + CDN manifest (already parsed)
- Engine: classify -> per-kind resolver -> path builder
- Store: atomic snapshot publish for refreshes
"""

from skincdn.assets import AssetIndex, AssetSource, DirectoryAssetSource, MemoryAssetSource
from skincdn.catalog import normalize
from skincdn.classify import ClassifiedName, ItemKind, PhaseTag, classify
from skincdn.engine import ItemImageResolver
from skincdn.errors import CatalogError, CatalogIntegrityError
from skincdn.paths import PathBuilder
from skincdn.resolvers import ResolvedAsset
from skincdn.schemas.catalog import CatalogSnapshot
from skincdn.settings import ResolverSettings
from skincdn.store import ResolverStore

__all__ = [
    "AssetIndex",
    "AssetSource",
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogSnapshot",
    "ClassifiedName",
    "DirectoryAssetSource",
    "ItemImageResolver",
    "ItemKind",
    "MemoryAssetSource",
    "PathBuilder",
    "PhaseTag",
    "ResolvedAsset",
    "ResolverSettings",
    "ResolverStore",
    "classify",
    "normalize",
    "__version__",
]
__version__ = "0.3.0"
