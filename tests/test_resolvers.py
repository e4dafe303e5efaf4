from __future__ import annotations

from conftest import icon_url

from skincdn.assets import AssetIndex, MemoryAssetSource
from skincdn.catalog import normalize
from skincdn.classify import ItemKind, PhaseTag
from skincdn.icons import IconService
from skincdn.resolvers import (
    resolve_generic,
    resolve_music_kit,
    resolve_sticker_like,
    resolve_weapon,
    resolve_weapon_by_index,
)
from skincdn.resolvers.sticker import extract_sticker_name, order_kits
from skincdn.resolvers.weapon import split_weapon_name
from skincdn.settings import ResolverSettings


def _icons(asset_files, **settings) -> IconService:
    return IconService(AssetIndex(MemoryAssetSource(asset_files), ResolverSettings(**settings)))


# ----------------- weapons -----------------


def test_split_weapon_name():
    assert split_weapon_name("AWP | Redline (Field-Tested)") == ("AWP", "Redline")
    assert split_weapon_name("Karambit") == ("Karambit", None)
    assert split_weapon_name("Karambit | ") == ("Karambit", None)


def test_weapon_skin_skips_colliding_token(snapshot):
    # first "AWP" token names nothing; the second one carries the prefab
    hit = resolve_weapon(snapshot, "AWP | Redline (Field-Tested)")
    assert hit is not None
    assert hit.kind == ItemKind.WEAPON
    assert hit.resource_path == "weapon_awp_cu_awp_redline"
    assert hit.url == "https://cdn.example/weapon_awp_cu_awp_redline.png"


def test_weapon_wear_does_not_change_result(snapshot):
    urls = {
        resolve_weapon(snapshot, f"AWP | Redline ({wear})").url
        for wear in ("Factory New", "Minimal Wear", "Field-Tested", "Well-Worn", "Battle-Scarred")
    }
    assert urls == {"https://cdn.example/weapon_awp_cu_awp_redline.png"}


def test_vanilla_knife_uses_item_class(snapshot):
    hit = resolve_weapon(snapshot, "Karambit")
    assert hit is not None
    assert hit.url == "https://cdn.example/weapon_knife_karambit.png"


def test_vanilla_without_manifest_entry_misses(snapshot):
    assert resolve_weapon(snapshot, "AWP") is None


def test_phases_pick_distinct_kits(snapshot):
    emerald = resolve_weapon(snapshot, "Karambit | Gamma Doppler (Factory New)", PhaseTag.EMERALD)
    phase1 = resolve_weapon(snapshot, "Karambit | Gamma Doppler (Factory New)", PhaseTag.PHASE1)
    assert emerald.url == "https://cdn.example/karambit_emerald.png"
    assert phase1.url == "https://cdn.example/karambit_gamma_phase1.png"
    # phase2 exists as a paint kit but has no manifest entry
    assert resolve_weapon(snapshot, "Karambit | Gamma Doppler (Factory New)", PhaseTag.PHASE2) is None


def test_no_phase_takes_first_kit_with_an_entry(snapshot):
    hit = resolve_weapon(snapshot, "Karambit | Gamma Doppler (Minimal Wear)")
    assert hit.url == "https://cdn.example/karambit_emerald.png"


def test_unknown_skin_misses(snapshot):
    assert resolve_weapon(snapshot, "AWP | Dragon Lore (Factory New)") is None


def test_weapon_by_index(snapshot):
    assert resolve_weapon_by_index(snapshot, 9, 279).url == "https://cdn.example/weapon_awp_cu_awp_redline.png"
    assert resolve_weapon_by_index(snapshot, "507").url == "https://cdn.example/weapon_knife_karambit.png"
    assert resolve_weapon_by_index(snapshot, 507, 0).url == "https://cdn.example/weapon_knife_karambit.png"
    assert resolve_weapon_by_index(snapshot, 9, 99999) is None
    assert resolve_weapon_by_index(snapshot, 1) is None


# ----------------- stickers / graffiti / patches -----------------


def test_extract_sticker_name():
    assert extract_sticker_name("Sticker | Robo", ItemKind.STICKER) == "Robo"
    assert extract_sticker_name("Sealed Graffiti | X-Axes (Tracer Yellow)", ItemKind.GRAFFITI) == "X-Axes"
    assert extract_sticker_name("Patch | Crazy Banana", ItemKind.PATCH) == "Crazy Banana"
    assert extract_sticker_name("Robo", ItemKind.STICKER) is None
    assert extract_sticker_name("Sticker | Robo", ItemKind.WEAPON) is None


def test_order_kits_partitions_graffiti(snapshot):
    kits = list(snapshot.sticker_kits_with_tag("StickerKit_xaxes"))
    assert [k.name for k in order_kits(kits, ItemKind.STICKER)] == ["xaxes", "spray_xaxes_graffiti"]
    assert [k.name for k in order_kits(kits, ItemKind.GRAFFITI)] == ["spray_xaxes_graffiti", "xaxes"]
    assert [k.name for k in order_kits(kits, ItemKind.PATCH)] == ["xaxes", "spray_xaxes_graffiti"]


def test_sticker_and_graffiti_sharing_a_token(snapshot, asset_files):
    icons = _icons(asset_files)
    sticker = resolve_sticker_like(snapshot, icons, "Sticker | X-Axes", ItemKind.STICKER)
    graffiti = resolve_sticker_like(snapshot, icons, "Sealed Graffiti | X-Axes (Tracer Yellow)", ItemKind.GRAFFITI)

    sticker_path = "resource/flash/econ/stickers/community01/xaxes_large.png"
    graffiti_path = "resource/flash/econ/stickers/default/xaxes_large.png"
    assert sticker.resource_path == sticker_path
    assert sticker.url == icon_url(sticker_path, asset_files[sticker_path])
    assert graffiti.kind == ItemKind.GRAFFITI
    assert graffiti.resource_path == graffiti_path
    assert graffiti.url == icon_url(graffiti_path, asset_files[graffiti_path])


def test_sticker_small_variant(snapshot, asset_files):
    icons = _icons(asset_files)
    hit = resolve_sticker_like(snapshot, icons, "Sticker | Robo", ItemKind.STICKER, large=False)
    assert hit.resource_path == "resource/flash/econ/stickers/community01/robo.png"


def test_disabled_graffiti_category_falls_back_to_sticker_kit(snapshot, asset_files):
    cats = frozenset({"stickers", "patches"})
    icons = _icons(asset_files, categories=cats)
    # graffiti kit file is gone, so the sticker kit is the only one left
    hit = resolve_sticker_like(snapshot, icons, "Sealed Graffiti | X-Axes", ItemKind.GRAFFITI)
    assert hit.resource_path == "resource/flash/econ/stickers/community01/xaxes_large.png"


def test_patch_uses_patch_material(snapshot, asset_files):
    icons = _icons(asset_files)
    hit = resolve_sticker_like(snapshot, icons, "Patch | Crazy Banana", ItemKind.PATCH)
    assert hit.resource_path == "resource/flash/econ/patches/case01/patch_crazy_banana_large.png"
    no_patches = _icons(asset_files, categories=frozenset({"stickers"}))
    assert resolve_sticker_like(snapshot, no_patches, "Patch | Crazy Banana", ItemKind.PATCH) is None


def test_unknown_sticker_misses(snapshot, asset_files):
    assert resolve_sticker_like(snapshot, _icons(asset_files), "Sticker | Nobody", ItemKind.STICKER) is None


# ----------------- music kits / generic -----------------


def test_music_kit(snapshot, asset_files):
    hit = resolve_music_kit(snapshot, _icons(asset_files), "Music Kit | Valve, CS:GO")
    path = "resource/flash/econ/music_kits/valve_01.png"
    assert hit.kind == ItemKind.MUSIC_KIT
    assert hit.url == icon_url(path, asset_files[path])
    assert resolve_music_kit(snapshot, _icons(asset_files), "Valve, CS:GO") is None


def test_generic_item_image(snapshot, asset_files):
    hit = resolve_generic(snapshot, _icons(asset_files), "Operation Phoenix Weapon Case")
    assert hit.resource_path == "resource/flash/econ/weapon_cases/crate_community_22.png"


def test_generic_falls_back_to_prefab_and_ignores_case(snapshot, asset_files):
    hit = resolve_generic(snapshot, _icons(asset_files), "chroma 3 CASE key")
    path = "resource/flash/econ/tools/crate_key_community_22.png"
    assert hit.resource_path == path
    assert hit.url == icon_url(path, asset_files[path])


def test_generic_miss(snapshot, asset_files):
    assert resolve_generic(snapshot, _icons(asset_files), "Nothing Like This") is None


def test_generic_tries_every_item_with_the_token(raw_items_game, raw_localization, asset_files):
    items = raw_items_game["items_game"]["items"]
    items["4290"] = dict(items["4288"])
    del items["4288"]["image_inventory"]
    snap = normalize(raw_items_game, raw_localization)

    hit = resolve_generic(snap, _icons(asset_files), "Operation Phoenix Weapon Case")
    assert hit is not None
    assert hit.resource_path == "resource/flash/econ/weapon_cases/crate_community_22.png"
