# -*- coding: utf-8 -*-
"""Per-kind resolvers."""

from skincdn.resolvers.base import ResolvedAsset
from skincdn.resolvers.generic import resolve_generic
from skincdn.resolvers.music import resolve_music_kit
from skincdn.resolvers.sticker import resolve_sticker_like
from skincdn.resolvers.weapon import resolve_weapon, resolve_weapon_by_index

__all__ = [
    "ResolvedAsset",
    "resolve_generic",
    "resolve_music_kit",
    "resolve_sticker_like",
    "resolve_weapon",
    "resolve_weapon_by_index",
]
