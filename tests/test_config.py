from __future__ import annotations

import pytest

from skincdn.config.loader import ConfigLoader
from skincdn.datafiles import DataPaths
from skincdn.settings import ResolverSettings

INI = """
[PATHS]
ITEMS_GAME = dumps/items_game.json
LOCALIZATION = /srv/csgo_english.json

[CDN]
BASE_URL = https://cdn.example/730
LARGE_STICKERS = no

[ASSETS]
GRAFFITI = false
PATCHES = maybe

[SERVER]
PORT = not-a-number
"""


@pytest.fixture
def cfg(tmp_path) -> ConfigLoader:
    path = tmp_path / "settings.ini"
    path.write_text(INI, encoding="utf-8")
    return ConfigLoader(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(tmp_path / "nope.ini")


def test_typed_getters(cfg):
    assert cfg.get("CDN", "BASE_URL") == "https://cdn.example/730"
    assert cfg.get("CDN", "MISSING") is None
    assert cfg.get_bool("CDN", "LARGE_STICKERS", True) is False
    assert cfg.get_bool("ASSETS", "PATCHES", True) is True
    assert cfg.get_int("SERVER", "PORT", 8000) == 8000
    assert cfg.get_path("PATHS", "ITEMS_GAME") == cfg.project_root / "dumps" / "items_game.json"


def test_settings_from_config(cfg):
    settings = ResolverSettings.from_config(cfg)
    assert settings.normalized_base_url() == "https://cdn.example/730/"
    assert settings.large_stickers is False
    assert "graffiti" not in settings.categories
    assert "patches" in settings.categories
    assert ResolverSettings.from_config(None) == ResolverSettings()


def test_data_paths_from_config(cfg, tmp_path):
    paths = DataPaths.from_config(cfg, items_game=tmp_path / "override.json")
    assert paths.items_game == tmp_path / "override.json"
    assert str(paths.localization) == "/srv/csgo_english.json"
    assert paths.cdn_manifest is None
    assert paths.asset_root is None
