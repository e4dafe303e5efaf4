#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""skincdn command line.

Examples
  skincdn resolve "AWP | Redline (Field-Tested)"
  skincdn resolve "★ Karambit | Gamma Doppler (Factory New)" --phase emerald
  skincdn sticker cologne2016/astr_gold --large
  skincdn weapon 9 279
  skincdn stats --json
  skincdn serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table

from apps.cli.cli_common import configure_logging, console, human_size, open_store, skincdn_config
from skincdn.classify import PhaseTag
from skincdn.engine import ItemImageResolver
from skincdn.errors import CatalogIntegrityError
from skincdn.version import project_version

EXIT_OK = 0
EXIT_MISS = 1
EXIT_ERROR = 2


def _add_data_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--items-game", help="items_game JSON dump (default: conf/settings.ini)")
    p.add_argument("--localization", help="localization JSON dump")
    p.add_argument("--cdn-manifest", help="CDN manifest JSON (key -> url)")
    p.add_argument("--assets", help="folder with the extracted resource/flash tree")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skincdn", description="Resolve item names to CDN image URLs.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    parser.add_argument("--version", action="version", version=f"skincdn {project_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolve", help="display name -> image URL")
    p.add_argument("names", nargs="+", help="display names, e.g. 'AWP | Redline (Field-Tested)'")
    p.add_argument("--phase", choices=[t.value for t in PhaseTag], help="Doppler phase")
    p.add_argument("--json", action="store_true", help="print JSON lines")
    _add_data_args(p)

    p = sub.add_parser("classify", help="show how a display name is classified")
    p.add_argument("names", nargs="+")
    _add_data_args(p)

    for cmd, label in (("sticker", "sticker_material"), ("patch", "patch_material"), ("status-icon", "status icon name")):
        p = sub.add_parser(cmd, help=f"{label} -> image URL")
        p.add_argument("name", help=label)
        p.add_argument("--large", action="store_true", help="the _large rendition")
        _add_data_args(p)

    p = sub.add_parser("weapon", help="def index [+ paint index] -> image URL")
    p.add_argument("def_index")
    p.add_argument("paint_index", nargs="?")
    _add_data_args(p)

    p = sub.add_parser("stats", help="snapshot and asset counts")
    p.add_argument("--json", action="store_true")
    p.add_argument("--collisions", type=int, default=0, help="list N colliding localization strings")
    _add_data_args(p)

    p = sub.add_parser("serve", help="run the HTTP API (uvicorn)")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.add_argument("--root-path", default="", help="reverse proxy mount path, e.g. /cdn")
    p.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug"])
    _add_data_args(p)

    return parser


# ----------------- commands -----------------


def _cmd_resolve(resolver: ItemImageResolver, args: argparse.Namespace) -> int:
    rc = EXIT_OK
    table = Table(title="Resolved images", box=box.SIMPLE_HEAVY)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("URL", style="white", overflow="fold")

    for name in args.names:
        hit = resolver.resolve_item_image(name, args.phase)
        if hit is None:
            rc = EXIT_MISS
        if args.json:
            row: Dict[str, Any] = {"name": name, "phase": args.phase}
            row.update(hit.to_dict() if hit else {"kind": None, "resource_path": None, "url": None})
            print(json.dumps(row, ensure_ascii=False))
            continue
        if hit is None:
            table.add_row(name, resolver.classify(name).kind.value, "[red]not found[/red]")
        else:
            table.add_row(name, hit.kind.value, hit.url)

    if not args.json:
        console.print(table)
    return rc


def _cmd_classify(resolver: ItemImageResolver, args: argparse.Namespace) -> int:
    table = Table(box=box.SIMPLE)
    table.add_column("Original", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Stripped", style="white")
    for name in args.names:
        cls = resolver.classify(name)
        table.add_row(cls.original_name, cls.kind.value, cls.stripped_name)
    console.print(table)
    return EXIT_OK


def _print_url(url: Optional[str], what: str) -> int:
    if url is None:
        console.print(f"[red]No image for {what}[/red]")
        return EXIT_MISS
    print(url)
    return EXIT_OK


def _cmd_stats(resolver: ItemImageResolver, args: argparse.Namespace) -> int:
    doc = resolver.stats()
    doc["meta"] = dict(resolver.snapshot.meta)
    if args.collisions:
        doc["collisions"] = [
            {"text": text, "tokens": list(tokens)}
            for text, tokens in resolver.snapshot.localization.collisions(limit=args.collisions)
        ]
    if args.json:
        print(json.dumps(doc, ensure_ascii=False, indent=2, default=str))
        return EXIT_OK

    cat = Table(title="Catalog", box=box.SIMPLE)
    cat.add_column("Section", style="cyan")
    cat.add_column("Count", justify="right")
    for k, v in doc["catalog"].items():
        cat.add_row(k, str(v))

    assets = Table(title="Assets", box=box.SIMPLE)
    assets.add_column("Category", style="cyan")
    assets.add_column("Files", justify="right")
    for k, v in sorted(doc["assets"].items()):
        assets.add_row(k, str(v))

    console.print(Panel.fit(f"skincdn {project_version()}  generated {doc['meta'].get('generated', '-')}"))
    console.print(cat)
    console.print(assets)

    sources = (doc["meta"].get("sources") or {})
    for key in ("items_game", "localization", "cdn_manifest"):
        sig = sources.get(key)
        if isinstance(sig, dict):
            console.print(f"[dim]{key}: {sig.get('path')} ({human_size(int(sig.get('size') or 0))})[/dim]")

    for row in doc.get("collisions") or []:
        console.print(f"[yellow]{row['text']!r}[/yellow] -> {', '.join(row['tokens'])}")
    return EXIT_OK


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from apps.webapi.app import create_app

    store = open_store(args)
    host = args.host or (skincdn_config.get("SERVER", "HOST") if skincdn_config else None) or "127.0.0.1"
    port = args.port or (skincdn_config.get_int("SERVER", "PORT", 8000) if skincdn_config else 8000)
    app = create_app(store, root_path=args.root_path)
    uvicorn.run(app, host=host, port=int(port), log_level=args.log_level)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "serve":
        return _cmd_serve(args)

    try:
        store = open_store(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Cannot load data: {e}[/red]")
        return EXIT_ERROR
    except CatalogIntegrityError as e:
        console.print(f"[red]Invalid catalog: {e}[/red]")
        return EXIT_ERROR

    resolver = store.current()
    assert resolver is not None

    if args.command == "resolve":
        return _cmd_resolve(resolver, args)
    if args.command == "classify":
        return _cmd_classify(resolver, args)
    if args.command == "sticker":
        return _print_url(resolver.get_sticker_url(args.name, large=args.large), f"sticker {args.name!r}")
    if args.command == "patch":
        return _print_url(resolver.get_patch_url(args.name, large=args.large), f"patch {args.name!r}")
    if args.command == "status-icon":
        return _print_url(resolver.get_status_icon_url(args.name, large=args.large), f"status icon {args.name!r}")
    if args.command == "weapon":
        return _print_url(resolver.get_weapon_url(args.def_index, args.paint_index), f"weapon {args.def_index}")
    if args.command == "stats":
        return _cmd_stats(resolver, args)

    parser.error(f"unknown command {args.command}")
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
