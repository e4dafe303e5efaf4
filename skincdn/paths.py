# -*- coding: utf-8 -*-
"""Content-addressed CDN URL builder.

resource/flash/econ/stickers/cologne2016/nv.png + bytes
  -> https://steamcdn-a.akamaihd.net/apps/730/icons/econ/stickers/cologne2016/nv.<sha1>.png
"""

from __future__ import annotations

import hashlib
import posixpath
from typing import Callable, Optional

from skincdn.settings import DEFAULT_CDN_BASE_URL

RESOURCE_PREFIX = "resource/flash/"
ICON_PREFIX = "icons/"

Hasher = Callable[[bytes], str]


def sha1_hex(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


def rewrite_resource_path(resource_path: str) -> str:
    """Map the resource directory onto the CDN's public icon directory."""
    p = (resource_path or "").replace("\\", "/").lstrip("/")
    if p.startswith(RESOURCE_PREFIX):
        return ICON_PREFIX + p[len(RESOURCE_PREFIX):]
    return p


def insert_hash(path: str, digest: str) -> str:
    """'a/b/nv.png' + 'abc' -> 'a/b/nv.abc.png' (no extension: 'a/b/nv.abc')."""
    head, tail = posixpath.split(path)
    stem, ext = posixpath.splitext(tail)
    named = f"{stem}.{digest}{ext}"
    return posixpath.join(head, named) if head else named


class PathBuilder:
    """Resource path + asset bytes -> public CDN URL.

    The hasher is injectable; identical bytes and path always give the same URL.
    """

    def __init__(self, base_url: str = DEFAULT_CDN_BASE_URL, hasher: Optional[Hasher] = None):
        base = (base_url or DEFAULT_CDN_BASE_URL).strip()
        self.base_url = base if base.endswith("/") else base + "/"
        self.hasher: Hasher = hasher or sha1_hex

    def build_path(self, resource_path: str, asset_bytes: bytes) -> str:
        return insert_hash(rewrite_resource_path(resource_path), self.hasher(asset_bytes))

    def build_url(self, resource_path: str, asset_bytes: Optional[bytes]) -> Optional[str]:
        if asset_bytes is None or not resource_path:
            return None
        return self.base_url + self.build_path(resource_path, asset_bytes)
