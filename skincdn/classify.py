#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Display-name classification.

Kinds are decided by a fixed-priority predicate chain (KIND_ORDER). Weapon
detection looks at the name with decorative prefixes removed; the
sticker/graffiti/patch markers are checked on the undecorated original because
quality decorations and kind markers never appear together.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from skincdn.schemas.catalog import CatalogSnapshot


class ItemKind(str, Enum):
    WEAPON = "weapon"
    MUSIC_KIT = "music_kit"
    STICKER = "sticker"
    GRAFFITI = "graffiti"
    PATCH = "patch"
    GENERIC = "generic"


KIND_ORDER = [
    ItemKind.WEAPON,
    ItemKind.MUSIC_KIT,
    ItemKind.STICKER,
    ItemKind.GRAFFITI,
    ItemKind.PATCH,
    ItemKind.GENERIC,
]


class PhaseTag(str, Enum):
    """Doppler-style phase variants; `suffix` is how the paint kit name ends."""

    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    BLACKPEARL = "blackpearl"
    EMERALD = "emerald"
    PHASE1 = "phase1"
    PHASE2 = "phase2"
    PHASE3 = "phase3"
    PHASE4 = "phase4"

    @property
    def suffix(self) -> str:
        if self.value in _GEM_PHASES:
            return f"am_{self.value}_marbleized"
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> Optional["PhaseTag"]:
        """None -> None; PhaseTag or its name/value (any case) -> PhaseTag.

        Raises ValueError for anything else.
        """
        if value is None or isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace(" ", "").replace("_", "")
        if not key:
            return None
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"unknown phase: {value!r}")


_GEM_PHASES = {"ruby", "sapphire", "blackpearl", "emerald"}

DECORATIVE_PREFIXES: Tuple[str, ...] = ("★ ", "StatTrak™ ", "Souvenir ")

WEARS: Tuple[str, ...] = (
    "Factory New",
    "Minimal Wear",
    "Field-Tested",
    "Well-Worn",
    "Battle-Scarred",
)

_WEAR_RE = re.compile(r"\s*\((?:" + "|".join(re.escape(w) for w in WEARS) + r")\)\s*$")

MUSIC_KIT_PREFIX = "Music Kit |"
STICKER_PREFIX = "Sticker |"
GRAFFITI_PREFIX = "Sealed Graffiti |"
PATCH_PREFIX = "Patch |"


@dataclass(frozen=True)
class ClassifiedName:
    kind: ItemKind
    stripped_name: str
    original_name: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "stripped_name": self.stripped_name,
            "original_name": self.original_name,
        }


def strip_decorations(name: str) -> str:
    """Drop leading '★ ', 'StatTrak™ ', 'Souvenir ' (in that order, each once)."""
    s = (name or "").strip()
    for prefix in DECORATIVE_PREFIXES:
        if s.startswith(prefix):
            s = s[len(prefix):]
    return s.strip()


def strip_wear(name: str) -> str:
    """'AWP | Redline (Field-Tested)' -> 'AWP | Redline'."""
    return _WEAR_RE.sub("", name or "").strip()


def weapon_token(name: str) -> str:
    """Left-hand side of 'Weapon | Skin' with any wear removed."""
    return strip_wear(name).split("|", 1)[0].strip()


def is_weapon_name(snapshot: CatalogSnapshot, name: str) -> bool:
    """True if the weapon token names a prefab or item used by either side."""

    token = weapon_token(name)
    if not token:
        return False
    for cand in snapshot.localization.candidates(token):
        if any(p.is_playable for p in snapshot.prefabs_with_tag(cand)):
            return True
        if any(i.is_playable for i in snapshot.items_with_tag(cand)):
            return True
    return False


def classify(display_name: str, snapshot: CatalogSnapshot) -> ClassifiedName:
    original = (display_name or "").strip()
    stripped = strip_decorations(original)

    if is_weapon_name(snapshot, stripped):
        kind = ItemKind.WEAPON
    elif stripped.startswith(MUSIC_KIT_PREFIX):
        kind = ItemKind.MUSIC_KIT
    elif original.startswith(STICKER_PREFIX):
        kind = ItemKind.STICKER
    elif original.startswith(GRAFFITI_PREFIX):
        kind = ItemKind.GRAFFITI
    elif original.startswith(PATCH_PREFIX):
        kind = ItemKind.PATCH
    else:
        kind = ItemKind.GENERIC

    return ClassifiedName(kind=kind, stripped_name=stripped, original_name=original)
