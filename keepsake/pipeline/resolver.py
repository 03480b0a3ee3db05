#!/usr/bin/env python3
"""
resolver.py
-----------
Content collection resolver.

One parameterised routine for every collection:

    1. discover entry directories under the collection root
    2. parse each metadata file's YAML front matter
    3. validate required fields (title, date)
    4. collect candidate image filenames
       (explicit 'images' list, else files on disk, plus designated images)
    5. resolve each filename through the AssetIndex
    6. pick the hero image
    7. sort newest first (stable for equal dates)

Failures are contained at the smallest unit: an unresolvable image is dropped
from its entry, an invalid entry is dropped from the listing, and only a
failure to enumerate the collection root escapes load_all().

Usage:
    resolver = CollectionResolver(config, AssetIndex.build(CONTENT_DIR))
    entries = resolver.load_all()
    entry = resolver.load_entry("summer-trip")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

# --- Local imports ---
from keepsake.assets.index import AssetIndex
from keepsake.core.cli import LoadStats
from keepsake.core.config import CollectionConfig
from keepsake.core.exceptions import (
    EntryNotFoundError,
    EntryParseError,
    EntryValidationError,
)
from keepsake.core.logging_manager import KeepsakeLogger, safe_logger
from keepsake.dataclasses.content_entry import ContentEntry, ImageRef
from keepsake.utils.fs import find_entry_dirs, find_image_filenames
from keepsake.utils.text import is_valid_slug


class CollectionResolver:
    """
    Resolves one content collection into validated, sorted entries.

    Attributes:
        config: Collection settings
        asset_index: Logical asset path → URL mapping
        logger: Logger (NullLogger when none is given)
        max_workers: Threads for per-entry loading (None or 1 = sequential)
        last_stats: Statistics of the most recent load_all() call
    """

    def __init__(
        self,
        config: CollectionConfig,
        asset_index: AssetIndex,
        logger: Optional[KeepsakeLogger] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.config = config
        self.asset_index = asset_index
        self.logger = safe_logger(logger)
        self.max_workers = max_workers
        self.last_stats: Optional[LoadStats] = None

    @property
    def name(self) -> str:
        return self.config.name

    # ---- Discovery ----
    def discover(self) -> List[Path]:
        """
        Entry directories under the collection root, in discovery order.

        Returns:
            Sorted entry directories; empty if the root does not exist

        Raises:
            OSError: If the root exists but cannot be listed
        """
        return find_entry_dirs(self.config.root, self.config.metadata_filename)

    # ---- Single entry ----
    def load_entry(self, slug: str) -> ContentEntry:
        """
        Load and resolve one entry.

        Args:
            slug: Entry directory name

        Returns:
            ContentEntry with resolved images

        Raises:
            EntryNotFoundError: If the slug is invalid or has no metadata file
            EntryParseError: If the metadata cannot be read or parsed
            EntryValidationError: If required fields are missing or invalid
        """
        if not is_valid_slug(slug):
            raise EntryNotFoundError(f"Invalid {self.name} slug: {slug!r}")

        entry_dir = self.config.root / slug
        metadata_path = entry_dir / self.config.metadata_filename
        if not metadata_path.is_file():
            raise EntryNotFoundError(f"{self.name.capitalize()} entry not found: {slug}")

        content_path = (
            entry_dir / self.config.content_filename
            if self.config.content_filename
            else None
        )

        entry = ContentEntry.from_file(
            metadata_path,
            slug=slug,
            collection=self.name,
            required_fields=self.config.required_fields,
            content_path=content_path,
        )
        return self._attach_images(entry, entry_dir)

    # ---- Whole collection ----
    def load_all(self) -> List[ContentEntry]:
        """
        Load every valid entry, newest first.

        Invalid entries are logged and skipped.

        Returns:
            Entries sorted by date descending; ties keep discovery order

        Raises:
            OSError: If the collection root cannot be enumerated
        """
        stats = LoadStats()
        entry_dirs = self.discover()
        stats.entries_discovered = len(entry_dirs)

        slugs = [d.name for d in entry_dirs]
        if self.max_workers and self.max_workers > 1 and len(slugs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self._try_load, slugs))
        else:
            results = [self._try_load(slug) for slug in slugs]

        entries = [entry for entry in results if entry is not None]
        stats.entries_loaded = len(entries)
        stats.entries_skipped = len(results) - len(entries)
        stats.images_resolved = sum(len(e.images) for e in entries)
        stats.images_dropped = sum(len(e.missing_images) for e in entries)

        # sorted() is stable, so equal dates keep discovery order
        entries = sorted(entries, key=lambda e: e.date, reverse=True)

        self.last_stats = stats
        self.logger.log_operation(f"load_{self.name}", stats.to_dict())
        return entries

    def _try_load(self, slug: str) -> Optional[ContentEntry]:
        """Load one entry for a listing; None if it must be skipped."""
        try:
            return self.load_entry(slug)
        except (EntryParseError, EntryValidationError, EntryNotFoundError) as e:
            self.logger.log_entry_skipped(self.name, slug, e)
            return None

    # ---- Images ----
    def candidate_filenames(self, metadata: Dict[str, Any], entry_dir: Path) -> List[str]:
        """
        Ordered, de-duplicated image filenames to resolve for an entry.

        Args:
            metadata: Entry front matter
            entry_dir: Entry directory (for the on-disk fallback)

        Returns:
            Filenames: the explicit 'images' list (or image files on disk),
            followed by designated images not already listed
        """
        names: List[str] = []
        declared = metadata.get("images")
        if isinstance(declared, list):
            for item in declared:
                filename = item.get("filename") if isinstance(item, dict) else item
                if isinstance(filename, str) and filename.strip():
                    names.append(filename.strip())

        if not names:
            names = find_image_filenames(entry_dir, self.config.image_dir)

        for field_name in self.config.image_fields:
            value = metadata.get(field_name)
            if isinstance(value, str) and value.strip():
                names.append(value.strip())

        return list(dict.fromkeys(names))

    def resolve_image(self, entry_dir: Path, filename: str) -> Optional[str]:
        """
        Resolve one image reference to a URL.

        Absolute references are returned unchanged. Relative ones are looked
        up as <entry>/<filename>, then <entry>/<image_dir>/<filename>.

        Returns:
            URL, or None if the asset index has no match
        """
        if filename.startswith("/"):
            return filename

        for key in self.lookup_keys(entry_dir, filename):
            url = self.asset_index.lookup(key)
            if url:
                return url

        self.logger.log_warning(
            f"Could not resolve image for {self.name} entry '{entry_dir.name}'",
            {"filename": filename, "tried": self.lookup_keys(entry_dir, filename)},
        )
        return None

    def lookup_keys(self, entry_dir: Path, filename: str) -> List[str]:
        base = self.asset_index.key_for(entry_dir)
        if base is None:
            base = PurePosixPath(self.config.root.name, entry_dir.name).as_posix()
        keys = [f"{base}/{filename}"]
        prefix = f"{self.config.image_dir}/"
        if self.config.image_dir and not filename.startswith(prefix):
            keys.append(f"{base}/{prefix}{filename}")
        return keys

    def _attach_images(self, entry: ContentEntry, entry_dir: Path) -> ContentEntry:
        """Resolve candidate images and pick the hero."""
        declared_alts = entry.declared_alt_texts()
        by_src: Dict[str, ImageRef] = {}
        by_name: Dict[str, ImageRef] = {}
        missing: List[str] = []

        for filename in self.candidate_filenames(entry.metadata, entry_dir):
            src = self.resolve_image(entry_dir, filename)
            if src is None:
                missing.append(filename)
                continue
            # a.jpg and img/a.jpg can both land on the same asset
            if src not in by_src:
                by_src[src] = ImageRef(filename, src, entry.alt_for(filename, declared_alts))
            by_name[filename] = by_src[src]

        images = list(by_src.values())
        hero: Optional[ImageRef] = None
        for field_name in self.config.image_fields:
            value = entry.metadata.get(field_name)
            if isinstance(value, str) and value.strip() in by_name:
                hero = by_name[value.strip()]
                break
        if hero is None and images:
            hero = images[0]

        return entry.with_images(images, hero, missing)
