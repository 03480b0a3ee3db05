"""
Keepsake Content Package
========================

Content collection resolver for a personal website.

Reads blog posts, diary entries and photo memories from directories of
Markdown files with YAML front matter, resolves their images through an
explicit asset index, and produces listing and entry page data sorted
newest first and grouped by year (or by year, month and day).

Main Components:
    - pipeline: Collection resolver, grouping, page loaders, JSON export
    - assets: Asset index mapping logical image paths to deployable URLs
    - core: Logging, exceptions, validation, paths, collection config
    - dataclasses: ContentEntry and ImageRef
    - utils: Filesystem, front matter and text utilities
    - validators: Front matter validation reports

Primary Interfaces:
    - keepsake.pipeline.cli: Pipeline CLI (`keepsake`)
    - keepsake.validators.cli: Validation CLI (`keepsake-validate`)
    - keepsake.pipeline.resolver.CollectionResolver: Collection interface

Example Usage:
    >>> from keepsake import AssetIndex, CollectionResolver, default_collections
    >>> from keepsake.core.paths import CONTENT_DIR
    >>> index = AssetIndex.build(CONTENT_DIR)
    >>> blog = CollectionResolver(default_collections(CONTENT_DIR)["blog"], index)
    >>> [entry.slug for entry in blog.load_all()]

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Keepsake Project"

# Expose primary interfaces for convenience
from keepsake.assets.index import AssetIndex
from keepsake.core.config import CollectionConfig, default_collections
from keepsake.core.paths import CONTENT_DIR, LOG_DIR
from keepsake.pipeline.resolver import CollectionResolver

__all__ = [
    "AssetIndex",
    "CollectionConfig",
    "CollectionResolver",
    "default_collections",
    "CONTENT_DIR",
    "LOG_DIR",
]
