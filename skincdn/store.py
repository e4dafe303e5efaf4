# -*- coding: utf-8 -*-
"""Publish + query the current resolver (thread-safe).

A refresh builds a brand new snapshot and resolver, then swaps one reference.
Readers never take the lock: they grab `current()` once and keep using that
resolver until their call returns, even if a newer one is published meanwhile.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from skincdn.assets import AssetIndex, AssetSource
from skincdn.catalog import normalize
from skincdn.engine import ItemImageResolver
from skincdn.settings import ResolverSettings

logger = logging.getLogger(__name__)

Listener = Callable[[ItemImageResolver], None]


class ResolverStore:
    def __init__(self, settings: Optional[ResolverSettings] = None):
        self.settings = settings or ResolverSettings()
        self._lock = threading.RLock()
        self._current: Optional[ItemImageResolver] = None
        self._generation = 0
        self._listeners: List[Listener] = []

    @property
    def ready(self) -> bool:
        return self._current is not None

    @property
    def generation(self) -> int:
        return self._generation

    def current(self) -> Optional[ItemImageResolver]:
        return self._current

    def add_listener(self, listener: Listener) -> None:
        """Call `listener(resolver)` after every publish."""
        with self._lock:
            self._listeners.append(listener)

    def publish(self, resolver: ItemImageResolver) -> int:
        """Make `resolver` current. Returns the new generation number."""
        with self._lock:
            self._current = resolver
            self._generation += 1
            gen = self._generation
            listeners = list(self._listeners)
        logger.info("Published catalog snapshot generation %d", gen)
        for cb in listeners:
            cb(resolver)
        return gen

    def refresh(
        self,
        raw_items_catalog: Mapping[str, Any],
        raw_localization_tree: Mapping[str, Any],
        *,
        assets: Union[AssetSource, AssetIndex],
        cdn_manifest: Optional[Mapping[str, Any]] = None,
        sources: Optional[Dict[str, Any]] = None,
    ) -> ItemImageResolver:
        """Normalize new trees and publish a resolver built on them.

        CatalogIntegrityError propagates and the previous resolver stays current.
        """
        snapshot = normalize(
            raw_items_catalog,
            raw_localization_tree,
            cdn_manifest=cdn_manifest,
            sources=sources,
        )
        resolver = ItemImageResolver(snapshot, assets, self.settings)
        self.publish(resolver)
        return resolver

    def resolve_item_image_url(self, display_name: str, phase: Any = None) -> Optional[str]:
        resolver = self._current
        if resolver is None:
            return None
        return resolver.resolve_item_image_url(display_name, phase)
