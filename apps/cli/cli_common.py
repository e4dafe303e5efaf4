#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared helpers for CLI tools."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from skincdn.datafiles import DataPaths, load_store
from skincdn.settings import ResolverSettings
from skincdn.store import ResolverStore

try:
    from skincdn.config import skincdn_config
except (ImportError, OSError):  # conf/settings.ini not shipped with the install
    skincdn_config = None  # type: ignore[assignment]

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "data"
CONF_DIR = PROJECT_ROOT / "conf"

console = Console()


def configure_logging(verbose: int = 0) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False, markup=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def settings_from_config() -> ResolverSettings:
    return ResolverSettings.from_config(skincdn_config)


def open_store(args: Any) -> ResolverStore:
    """Build a store from --items-game/--localization/... flags or conf/settings.ini."""
    paths = DataPaths.from_config(
        skincdn_config,
        items_game=_opt_path(getattr(args, "items_game", None)),
        localization=_opt_path(getattr(args, "localization", None)),
        cdn_manifest=_opt_path(getattr(args, "cdn_manifest", None)),
        asset_root=_opt_path(getattr(args, "assets", None)),
    )
    return load_store(paths, settings_from_config())


def _opt_path(v: Optional[str]) -> Optional[Path]:
    return Path(v) if v else None


def human_size(num: int) -> str:
    if num <= 0:
        return "-"
    for unit in ("B", "KiB", "MiB", "GiB"):
        if num < 1024.0:
            return f"{num:.0f} {unit}" if unit == "B" else f"{num:.1f} {unit}"
        num /= 1024.0
    return f"{num:.1f} TiB"
