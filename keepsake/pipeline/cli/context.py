#!/usr/bin/env python3
"""
context.py
----------
Lazily built shared state for pipeline commands.

The site config and the asset index are built on first use and cached on
the click context, so commands that need neither stay cheap.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict

# --- Third-party imports ---
import click

# --- Local imports ---
from keepsake.assets.index import AssetIndex
from keepsake.core.config import CollectionConfig, load_site_config
from keepsake.core.exceptions import ValidationError
from keepsake.pipeline.resolver import CollectionResolver


def get_collections(ctx: click.Context) -> Dict[str, CollectionConfig]:
    """Collection configs from the site config (cached)."""
    obj = ctx.obj
    if "collections" not in obj:
        obj["collections"] = load_site_config(obj["config_path"], obj["content_root"])
    return obj["collections"]


def get_asset_index(ctx: click.Context) -> AssetIndex:
    """Asset index of the content root (cached)."""
    obj = ctx.obj
    if "asset_index" not in obj:
        obj["asset_index"] = AssetIndex.build(obj["content_root"], logger=obj["logger"])
    return obj["asset_index"]


def get_resolver(ctx: click.Context, name: str) -> CollectionResolver:
    """
    Resolver for a configured collection.

    Raises:
        ValidationError: If the collection is not configured
    """
    collections = get_collections(ctx)
    if name not in collections:
        raise ValidationError(
            f"Unknown collection '{name}'. Available: {', '.join(sorted(collections))}"
        )
    return CollectionResolver(
        collections[name],
        get_asset_index(ctx),
        logger=ctx.obj["logger"],
        max_workers=ctx.obj.get("workers"),
    )
