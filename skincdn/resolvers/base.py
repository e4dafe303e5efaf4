# -*- coding: utf-8 -*-
"""Shared resolver result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from skincdn.classify import ItemKind


@dataclass(frozen=True)
class ResolvedAsset:
    """A resolved image.

    resource_path is the asset path inside the resource tree, or the CDN
    manifest key for weapons (their URL comes straight from the manifest).
    """

    kind: ItemKind
    resource_path: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "resource_path": self.resource_path, "url": self.url}
