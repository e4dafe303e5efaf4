"""Shared fixtures: a tiny items_game / localization / CDN manifest / asset set.

The data carries the collisions the resolver has to cope with:
- two tokens display as "AWP"; only the second names a weapon
- a sticker kit and a graffiti kit share the "X-Axes" token (sticker first)
- two Gamma Doppler paint kits share one description tag (emerald, phase1)
"""
from __future__ import annotations

import copy
import hashlib
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from skincdn.assets import MemoryAssetSource
from skincdn.catalog import normalize
from skincdn.engine import ItemImageResolver

CDN = "https://steamcdn-a.akamaihd.net/apps/730/"

_ITEMS_GAME: Dict[str, Any] = {
    "items_game": {
        "items": {
            "9": {
                "name": "weapon_awp",
                "prefab": "weapon_awp_prefab",
                "item_name": "#SFUI_WPNHUD_AWP",
            },
            "507": {
                "name": "weapon_knife_karambit",
                "prefab": "melee_unusual",
                "item_name": "#SFUI_WPNHUD_KnifeKaram",
                "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
            },
            "4288": {
                "name": "crate_community_22",
                "item_name": "#CSGO_crate_community_22",
                "image_inventory": "econ/weapon_cases/crate_community_22",
            },
            "4289": {
                "name": "crate_key_community_22",
                "item_name": "#CSGO_crate_key_community_22",
                "prefab": "weapon_case_key",
            },
        },
        "prefabs": {
            "sniper_rifle": {"item_class": "weapon_sniper_base"},
            "weapon_awp_prefab": {
                "prefab": "sniper_rifle",
                "item_class": "weapon_awp",
                "item_name": "#SFUI_WPNHUD_AWP",
                "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
            },
            "melee_unusual": {"prefab": "melee"},
            "crate_key_community_22_prefab": {
                "item_name": "#CSGO_crate_key_community_22",
                "image_inventory": "econ/tools/crate_key_community_22",
            },
        },
        "paint_kits": {
            "279": {"name": "cu_awp_redline", "description_tag": "#PaintKit_CU_AWP_Redline_Tag"},
            "568": {"name": "am_emerald_marbleized", "description_tag": "#PaintKit_am_gamma_doppler_Tag"},
            "569": {"name": "am_gamma_doppler_phase1", "description_tag": "#PaintKit_am_gamma_doppler_Tag"},
            "570": {"name": "am_gamma_doppler_phase2", "description_tag": "#PaintKit_am_gamma_doppler_Tag"},
        },
        "sticker_kits": {
            "1": {"name": "robo", "item_name": "#StickerKit_robo", "sticker_material": "community01/robo"},
            "10": {"name": "xaxes", "item_name": "#StickerKit_xaxes", "sticker_material": "community01/xaxes"},
            "11": {
                "name": "spray_xaxes_graffiti",
                "item_name": "#StickerKit_xaxes",
                "sticker_material": "default/xaxes",
            },
            "4501": {
                "name": "patch_crazy_banana",
                "item_name": "#PatchKit_crazy_banana",
                "patch_material": "case01/patch_crazy_banana",
            },
        },
        "music_definitions": {
            "3": {
                "name": "valve_csgo_01",
                "loc_name": "#musickit_valve_csgo_01",
                "image_inventory": "econ/music_kits/valve_01",
            },
        },
    }
}

_LOCALIZATION: Dict[str, Any] = {
    "lang": {
        "Language": "English",
        "Tokens": {
            "SFUI_AWP_Promo": "AWP",
            "SFUI_WPNHUD_AWP": "AWP",
            "SFUI_WPNHUD_KnifeKaram": "Karambit",
            "PaintKit_cu_awp_redline_Tag": "Redline",
            "PaintKit_am_gamma_doppler_Tag": "Gamma Doppler",
            "StickerKit_robo": "Robo",
            "StickerKit_xaxes": "X-Axes",
            "PatchKit_crazy_banana": "Crazy Banana",
            "musickit_valve_csgo_01": "Valve, CS:GO",
            "CSGO_crate_community_22": "Operation Phoenix Weapon Case",
            "CSGO_crate_key_community_22": "Chroma 3 Case Key",
        },
    }
}

_CDN_MANIFEST: Dict[str, str] = {
    "weapon_awp_cu_awp_redline": "https://cdn.example/weapon_awp_cu_awp_redline.png",
    "weapon_knife_karambit": "https://cdn.example/weapon_knife_karambit.png",
    "weapon_knife_karambit_am_emerald_marbleized": "https://cdn.example/karambit_emerald.png",
    "weapon_knife_karambit_am_gamma_doppler_phase1": "https://cdn.example/karambit_gamma_phase1.png",
}

_ASSETS: Dict[str, bytes] = {
    "resource/flash/econ/stickers/community01/robo.png": b"robo-small",
    "resource/flash/econ/stickers/community01/robo_large.png": b"robo-large",
    "resource/flash/econ/stickers/community01/xaxes_large.png": b"xaxes-sticker",
    "resource/flash/econ/stickers/default/xaxes_large.png": b"xaxes-graffiti",
    "resource/flash/econ/patches/case01/patch_crazy_banana_large.png": b"banana",
    "resource/flash/econ/music_kits/valve_01.png": b"valve-01",
    "resource/flash/econ/weapon_cases/crate_community_22.png": b"case-22",
    "resource/flash/econ/tools/crate_key_community_22.png": b"key-22",
    "resource/flash/econ/status_icons/service_medal_2015_large.png": b"medal",
    "resource/flash/econ/unlisted/stray.png": b"stray",
}


def icon_url(path: str, data: bytes) -> str:
    """Expected CDN URL for a resource path + bytes."""
    rel = path[len("resource/flash/"):]
    stem, ext = rel.rsplit(".", 1)
    return f"{CDN}icons/{stem}.{hashlib.sha1(data).hexdigest()}.{ext}"


@pytest.fixture
def raw_items_game() -> Dict[str, Any]:
    return copy.deepcopy(_ITEMS_GAME)


@pytest.fixture
def raw_localization() -> Dict[str, Any]:
    return copy.deepcopy(_LOCALIZATION)


@pytest.fixture
def cdn_manifest() -> Dict[str, str]:
    return dict(_CDN_MANIFEST)


@pytest.fixture
def asset_files() -> Dict[str, bytes]:
    return dict(_ASSETS)


@pytest.fixture
def snapshot(raw_items_game, raw_localization, cdn_manifest):
    return normalize(raw_items_game, raw_localization, cdn_manifest=cdn_manifest)


@pytest.fixture
def resolver(snapshot, asset_files) -> ItemImageResolver:
    return ItemImageResolver(snapshot, MemoryAssetSource(asset_files))


@pytest.fixture
def data_dir(tmp_path: Path, raw_items_game, raw_localization, cdn_manifest, asset_files) -> Path:
    """The fixture data written out the way the CLI expects it."""
    (tmp_path / "items_game.json").write_text(json.dumps(raw_items_game), encoding="utf-8")
    (tmp_path / "csgo_english.json").write_text(json.dumps(raw_localization), encoding="utf-8")
    (tmp_path / "items_game_cdn.json").write_text(json.dumps(cdn_manifest), encoding="utf-8")
    for rel, data in asset_files.items():
        p = tmp_path / "assets" / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
    return tmp_path
