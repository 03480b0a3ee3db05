#!/usr/bin/env python3
"""
content.py
----------
Content commands for the pipeline CLI.

Commands:
    - list: Grouped listing of a collection
    - show: A single entry with resolved images
    - export: Write listing and entry page data as JSON

Usage:
    keepsake list blog
    keepsake show memories lake-weekend --json
    keepsake export build/data blog
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Tuple

# --- Third-party imports ---
import click

# --- Local imports ---
from keepsake.core.config import GROUP_BY_DAY
from keepsake.core.logging_manager import handle_cli_error
from keepsake.pipeline.cli.context import get_collections, get_resolver
from keepsake.pipeline.export_json import JSONExporter
from keepsake.pipeline.loaders import CollectionListing, load_listing, load_page


def _echo_listing(listing: CollectionListing, group_by: str) -> None:
    """Print a listing as an indented year (month/day) outline."""
    click.echo(f"{listing.collection} ({len(listing.entries)} entries)")
    for group in listing.groups:
        click.echo(f"\n{group.year}")
        if group_by == GROUP_BY_DAY:
            for month in group.months:
                click.echo(f"  {month.month:02d}")
                for day in month.days:
                    for entry in day.entries:
                        click.echo(f"    {day.day:02d}  {entry.slug}  {entry.title}")
        else:
            for entry in group.entries:
                click.echo(f"  {entry.date.isoformat()}  {entry.slug}  {entry.title}")


@click.command("list")
@click.argument("collection")
@click.option("--json", "as_json", is_flag=True, help="Print listing page data as JSON")
@click.pass_context
def list_collection(ctx: click.Context, collection: str, as_json: bool) -> None:
    """
    List the entries of a collection, newest first.

    Entries are grouped by year (blog, diary) or by year, month and day
    (memories). Entries with invalid metadata are left out and logged.

    Examples:
        keepsake list blog
        keepsake list memories --json
    """
    try:
        resolver = get_resolver(ctx, collection)
        listing = load_listing(resolver)

        if as_json:
            click.echo(json.dumps(listing.to_dict(), indent=2, ensure_ascii=False, default=str))
            return

        if listing.is_empty:
            click.echo(f"No {collection} entries found in {resolver.config.root}")
            return

        _echo_listing(listing, resolver.config.group_by)

        if ctx.obj.get("verbose") and resolver.last_stats:
            click.echo(f"\n{resolver.last_stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "list", {"collection": collection})


@click.command()
@click.argument("collection")
@click.argument("slug")
@click.option("--json", "as_json", is_flag=True, help="Print entry page data as JSON")
@click.pass_context
def show(ctx: click.Context, collection: str, slug: str, as_json: bool) -> None:
    """
    Show one entry with its resolved images.

    Exits with status 1 when the entry does not exist or its metadata is
    invalid.

    Examples:
        keepsake show blog summer-trip
        keepsake show diary 2024-05-01 --json
    """
    try:
        resolver = get_resolver(ctx, collection)
        page = load_page(resolver, slug)

        if as_json:
            click.echo(json.dumps(page, indent=2, ensure_ascii=False, default=str))
            return

        click.echo(f"📄 {page['title']}")
        click.echo(f"   Date: {page['date']}")
        if page["edited"]:
            click.echo(f"   Edited: {', '.join(page['edited'])}")
        if page["description"]:
            click.echo(f"   {page['description']}")
        if page["hero"]:
            click.echo(f"   Hero: {page['hero']['src']}")
        click.echo(f"   Images: {len(page['images'])}")
        for image in page["gallery"]:
            click.echo(f"     - {image['src']}  ({image['alt']})")

    except Exception as e:
        handle_cli_error(ctx, e, "show", {"collection": collection, "slug": slug})


@click.command()
@click.argument("out_dir", type=click.Path(file_okay=False))
@click.argument("collections", nargs=-1)
@click.pass_context
def export(ctx: click.Context, out_dir: str, collections: Tuple[str, ...]) -> None:
    """
    Export listing and entry page data as JSON.

    Writes <collection>/index.json and <collection>/<slug>.json under
    OUT_DIR for each named collection (all configured ones by default).

    Examples:
        keepsake export build/data
        keepsake export build/data blog diary
    """
    try:
        logger = ctx.obj["logger"]
        names = list(collections) or list(get_collections(ctx))
        resolvers = {name: get_resolver(ctx, name) for name in names}

        exporter = JSONExporter(resolvers, output_dir=Path(out_dir), logger=logger)
        click.echo(f"Exporting {', '.join(names)} to {out_dir}...")
        stats = exporter.export_all(names)

        click.echo(f"✅ Export complete: {stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "export", {"out_dir": out_dir})
