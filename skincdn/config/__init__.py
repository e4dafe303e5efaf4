# -*- coding: utf-8 -*-
"""Project configuration (conf/settings.ini)."""

from skincdn.config.loader import ConfigLoader, skincdn_config

__all__ = ["ConfigLoader", "skincdn_config"]
