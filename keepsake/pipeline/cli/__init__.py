#!/usr/bin/env python3
"""
Keepsake Pipeline CLI
---------------------

Command-line interface for inspecting and exporting content collections.

Command Groups:
    - Content: list, show, export
    - Assets: assets, publish-assets

Usage:
    # Grouped listing of a collection
    keepsake list blog
    keepsake list memories --json

    # One entry with resolved images
    keepsake show diary 2024-05-01

    # Page data for the static site
    keepsake export build/data
    keepsake export build/data blog diary

    # Asset index
    keepsake assets --manifest build/assets.json
    keepsake publish-assets build/public
"""
from __future__ import annotations

import click
from pathlib import Path

from keepsake.core.paths import CONTENT_DIR, LOG_DIR, SITE_CONFIG_PATH
from keepsake.core.cli import setup_logger


@click.group()
@click.option(
    "--content-root",
    type=click.Path(file_okay=False),
    default=str(CONTENT_DIR),
    help="Directory holding the collection directories",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(SITE_CONFIG_PATH),
    help="YAML site config with collection overrides",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=1,
    help="Threads used to load entries",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    content_root: str,
    config_path: str,
    log_dir: str,
    workers: int,
    verbose: bool,
) -> None:
    """Keepsake Content Pipeline"""
    ctx.ensure_object(dict)
    ctx.obj["content_root"] = Path(content_root)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["workers"] = workers
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "pipeline")


# Import and register commands from submodules
from .content import list_collection, show, export
from .assets import assets, publish_assets

# Register commands
cli.add_command(list_collection)
cli.add_command(show)
cli.add_command(export)
cli.add_command(assets)
cli.add_command(publish_assets)


if __name__ == "__main__":
    cli(obj={})
