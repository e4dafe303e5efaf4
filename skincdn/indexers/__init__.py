# -*- coding: utf-8 -*-
"""Lookup indexes built from parsed game data."""

from skincdn.indexers.localization import LocalizationTable

__all__ = ["LocalizationTable"]
