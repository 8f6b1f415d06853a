#!/usr/bin/env python3
"""
Tablets CLI

Command-line interface for inspecting tablets and shards.

Usage:
    python -m tablets catalog <sources> [options]
    python -m tablets heap <sources> [options]
    python -m tablets read <name> <sources> [options]

    python -m tablets catalog ./registry/              # list every tablet in a directory
    python -m tablets heap ./registry/ --contents      # list and print every shard
    python -m tablets read strings ./registry/ --shard 1

Options:
    --ext EXT              Only take files with this extension from directories
    --skip-unreadable      Report and skip unreadable documents instead of failing
    --contents             (catalog, heap) Print the transcribed text as well
    --shard N              (read) Read the N-th shard instead of the whole tablet
    --raw                  (read) Print plain markdown instead of rendering it
"""

import argparse
import os
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from .registry import Registry
from .tablet import TabletError
from .transcriptor import Transcriptor

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablets",
        description=(
            "Read-only tablet inspector\n\n"
            "Lists tablets (whole documents) and shards (sections between\n"
            "separator lines) and prints them as Markdown."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m tablets catalog ./registry/\n"
            "  python -m tablets heap ./registry/ --ext .rs --contents\n"
            "  python -m tablets read ownership ./registry/ --shard 0\n"
        ),
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    catalog = subparsers.add_parser("catalog", help="List every tablet")
    _add_source_arguments(catalog)
    catalog.add_argument(
        "--contents",
        action="store_true",
        help="Print the transcribed text of every tablet",
    )

    heap = subparsers.add_parser("heap", help="List every shard of every tablet")
    _add_source_arguments(heap)
    heap.add_argument(
        "--contents",
        action="store_true",
        help="Print the transcribed text of every shard",
    )

    read = subparsers.add_parser("read", help="Print one tablet or shard as Markdown")
    read.add_argument("name", help="Tablet name (file name without extension)")
    _add_source_arguments(read)
    read.add_argument(
        "--shard",
        type=int,
        default=None,
        help="Zero-based shard index to read instead of the whole tablet",
    )
    read.add_argument(
        "--raw",
        action="store_true",
        help="Print plain Markdown instead of rendering it",
    )

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "sources",
        nargs="+",
        help="Tablet files or directories of tablet files",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Only take files with this extension from directories (repeatable)",
    )
    parser.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Report unreadable documents and leave them out",
    )


def build_registry(args: argparse.Namespace) -> Registry:
    """Expand the given sources into a registry, keeping their order."""
    on_error = "skip" if args.skip_unreadable else "raise"
    paths = []
    for source in args.sources:
        if os.path.isdir(source):
            paths.extend(Registry.from_directory(source, extensions=args.ext).paths)
        else:
            paths.append(source)
    return Registry(paths, on_error=on_error)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        registry = build_registry(args)
        if args.command == "catalog":
            _show_catalog(registry, args.contents)
        elif args.command == "heap":
            _show_heap(registry, args.contents)
        else:
            _show_tablet(registry, args.name, args.shard, args.raw)
    except (TabletError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except (KeyError, IndexError) as e:
        print(f"[ERROR] {e.args[0] if e.args else e}", file=sys.stderr)
        return 1

    return 0


def _show_catalog(registry: Registry, contents: bool) -> None:
    tablets = registry.catalog()

    table = Table(title=f"Catalog ({len(tablets)} tablets)")
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", overflow="fold")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Lines", justify="right")
    for tablet in tablets:
        table.add_row(
            Text(tablet.name),
            Text(tablet.path),
            str(tablet.start),
            str(tablet.end),
            str(tablet.length),
        )
    console.print(table)

    if contents:
        for tablet in tablets:
            _print_contents(f"TABLET {tablet.name.upper()}", Transcriptor.read(tablet))


def _show_heap(registry: Registry, contents: bool) -> None:
    shards = registry.heap()

    table = Table(title=f"Heap ({len(shards)} shards)")
    table.add_column("Shard", no_wrap=True)
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Lines", justify="right")
    for shard in shards:
        table.add_row(
            Text(f"{shard.name}-{shard.start}"),
            str(shard.start),
            str(shard.end),
            str(shard.length),
        )
    console.print(table)

    if contents:
        for shard in shards:
            _print_contents(f"shard {shard.name}-{shard.start}", Transcriptor.read(shard))


def _show_tablet(registry: Registry, name: str, shard_index, raw: bool) -> None:
    tablet = registry.find(name)
    if shard_index is not None:
        shards = list(tablet.shards())
        if not 0 <= shard_index < len(shards):
            raise IndexError(
                f"Tablet {name!r} has {len(shards)} shards, no shard {shard_index}"
            )
        tablet = shards[shard_index]

    text = Transcriptor.read(tablet)
    if raw:
        print(text)
    else:
        console.print(Markdown(text))


def _print_contents(title: str, text: str) -> None:
    print()
    print(f"{'#' * 17} {title} {'#' * 17}")
    print(text)


if __name__ == "__main__":
    sys.exit(main())
