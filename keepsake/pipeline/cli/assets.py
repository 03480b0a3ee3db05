#!/usr/bin/env python3
"""
assets.py
---------
Asset index commands for the pipeline CLI.

Commands:
    - assets: Print the asset index or write it as a manifest
    - publish-assets: Copy indexed files to their hashed URL paths

Usage:
    keepsake assets
    keepsake assets --manifest build/assets.json
    keepsake publish-assets build/public
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from keepsake.core.logging_manager import handle_cli_error
from keepsake.pipeline.cli.context import get_asset_index


@click.command()
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the index to this JSON file instead of printing it",
)
@click.pass_context
def assets(ctx: click.Context, manifest: Optional[str]) -> None:
    """
    Show the asset index of the content root.

    Examples:
        keepsake assets
        keepsake assets --manifest build/assets.json
    """
    try:
        index = get_asset_index(ctx)

        if manifest:
            index.to_manifest(Path(manifest))
            click.echo(f"✅ Wrote {len(index)} assets to {manifest}")
            return

        for key, url in index.items():
            click.echo(f"{key} → {url}")
        click.echo(f"\n{len(index)} assets")

    except Exception as e:
        handle_cli_error(ctx, e, "assets")


@click.command("publish-assets")
@click.argument("out_dir", type=click.Path(file_okay=False))
@click.pass_context
def publish_assets(ctx: click.Context, out_dir: str) -> None:
    """
    Copy indexed assets to the paths their URLs name under OUT_DIR.

    Files already present with identical content are left untouched.

    Examples:
        keepsake publish-assets build/public
    """
    try:
        index = get_asset_index(ctx)
        stats = index.publish(Path(out_dir), logger=ctx.obj["logger"])
        click.echo(f"✅ Assets published: {stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "publish_assets", {"out_dir": out_dir})
