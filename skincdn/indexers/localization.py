#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Localization index (token <-> display string).

The localization tree (csgo_english) maps tokens to display strings inside
arbitrarily nested sections. Many tokens share one display string, so the
inverted side is multi-valued: display string -> every token, in discovery
order. Lookups return the full candidate list; picking one is the caller's
job.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


def _walk_leaves(tree: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield (key, value) for every string leaf, depth-first in mapping order."""

    for key, val in tree.items():
        if val is None:
            continue
        if isinstance(val, Mapping):
            yield from _walk_leaves(val)
            continue
        if isinstance(val, (list, tuple)):
            # duplicate-key blocks from KeyValues dumps
            for sub in val:
                if isinstance(sub, Mapping):
                    yield from _walk_leaves(sub)
                elif isinstance(sub, str):
                    yield str(key), sub
            continue
        if isinstance(val, str):
            yield str(key), val


def _freeze(mp: Dict[str, List[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in mp.items()})


@dataclass(frozen=True)
class LocalizationTable:
    tokens: Mapping[str, str]
    inverted: Mapping[str, Tuple[str, ...]]
    inverted_folded: Mapping[str, Tuple[str, ...]]

    @classmethod
    def build(cls, tree: Mapping[str, Any]) -> "LocalizationTable":
        tokens: Dict[str, str] = {}
        inverted: Dict[str, List[str]] = {}
        folded: Dict[str, List[str]] = {}
        for key, val in _walk_leaves(tree):
            tokens.setdefault(key.lower(), val)
            inverted.setdefault(val, []).append(key)
            folded.setdefault(val.lower(), []).append(key)
        return cls(
            tokens=MappingProxyType(tokens),
            inverted=_freeze(inverted),
            inverted_folded=_freeze(folded),
        )

    def __len__(self) -> int:
        return len(self.tokens)

    def candidates(self, text: str, *, ignore_case: bool = False) -> Tuple[str, ...]:
        """Tokens whose display string equals `text` (exact or case-insensitive)."""
        s = str(text or "").strip()
        if not s:
            return ()
        if ignore_case:
            return self.inverted_folded.get(s.lower(), ())
        return self.inverted.get(s, ())

    def text(self, token: str) -> Optional[str]:
        t = str(token or "").strip()
        if t.startswith("#"):
            t = t[1:]
        return self.tokens.get(t.lower())

    def distinct_strings(self) -> int:
        return len(self.inverted)

    def collision_count(self) -> int:
        return sum(1 for v in self.inverted.values() if len(v) > 1)

    def collisions(self, limit: int = 0) -> List[Tuple[str, Tuple[str, ...]]]:
        out = [(k, v) for k, v in self.inverted.items() if len(v) > 1]
        return out[:limit] if limit > 0 else out
