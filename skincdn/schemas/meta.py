#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Metadata helpers for catalog snapshots."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from skincdn.version import versions

SNAPSHOT_SCHEMA = 1


def now_iso() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


def build_meta(
    *,
    schema: int = SNAPSHOT_SCHEMA,
    tool: str,
    sources: Optional[Dict[str, Any]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    meta: Dict[str, Any] = {
        "schema": int(schema),
        "generated": now_iso(),
        "tool": str(tool),
    }
    meta.update(versions())
    if sources:
        meta["sources"] = dict(sources)
    if extra:
        meta.update(extra)
    return meta
