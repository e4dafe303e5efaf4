# -*- coding: utf-8 -*-
"""conf/settings.ini loader."""

from __future__ import annotations

import configparser
import os
from pathlib import Path
from typing import Optional


class ConfigLoader:
    def __init__(self, config_path: Optional[Path] = None):
        # project root is two levels above skincdn/config/
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else self.project_root / "conf" / "settings.ini"

        self.config = configparser.ConfigParser()
        if not self.config_path.exists():
            raise FileNotFoundError(f"Missing config file: {self.config_path}")

        self.config.read(self.config_path, encoding="utf-8")

    def get(self, section: str, key: str) -> Optional[str]:
        """Return a config value with user paths (~) expanded."""
        val = self.config.get(section, key, fallback=None)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        try:
            return self.config.getboolean(section, key, fallback=default)
        except ValueError:
            return default

    def get_int(self, section: str, key: str, default: int) -> int:
        try:
            return self.config.getint(section, key, fallback=default)
        except ValueError:
            return default

    def get_path(self, section: str, key: str) -> Optional[Path]:
        """Return a path value; relative paths are anchored at the project root."""
        val = self.get(section, key)
        if not val:
            return None
        p = Path(val)
        return p if p.is_absolute() else self.project_root / p


# Shared instance
skincdn_config = ConfigLoader()
