#!/usr/bin/env python3
"""
config.py
---------
Collection configuration for the Keepsake content pipeline.

Every content collection is described by a CollectionConfig. The resolver is
one routine parameterised by these values, so the blog, the diary and the
memories albums differ only in configuration:

    blog      src: <content>/blog/<slug>/+page.md       grouped by year
    diary     src: <content>/diary/<slug>/+page.md      grouped by year
    memories  src: <content>/memories/<slug>/info.md    grouped by year/month/day
              body from content.md, four preview images per album

An optional YAML site config overrides these defaults:

    collections:
      blog:
        root: posts
        image_fields: [featuredImage]
      memories:
        preview_limit: 6

Relative roots are resolved against the content directory.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from keepsake.core.exceptions import ValidationError

GROUP_BY_YEAR = "year"
GROUP_BY_DAY = "day"
GROUPINGS = (GROUP_BY_YEAR, GROUP_BY_DAY)

# Highest precedence first
DEFAULT_IMAGE_FIELDS: Tuple[str, ...] = ("heroImage", "coverImage", "featuredImage")
DEFAULT_REQUIRED_FIELDS: Tuple[str, ...] = ("title", "date")


@dataclass(frozen=True)
class CollectionConfig:
    """
    Settings for one content collection.

    Attributes:
        name: Collection name ('blog', 'diary', 'memories')
        root: Directory holding one subdirectory per entry
        metadata_filename: Markdown file with the YAML front matter
        content_filename: Optional separate Markdown body file
        required_fields: Front matter fields every entry must carry
        image_fields: Designated-image fields, highest precedence first
        image_dir: Conventional image subdirectory inside an entry
        group_by: 'year' or 'day' (year/month/day)
        preview_limit: Number of preview images in listings (None = all)
    """

    name: str
    root: Path
    metadata_filename: str = "+page.md"
    content_filename: Optional[str] = None
    required_fields: Tuple[str, ...] = DEFAULT_REQUIRED_FIELDS
    image_fields: Tuple[str, ...] = DEFAULT_IMAGE_FIELDS
    image_dir: str = "img"
    group_by: str = GROUP_BY_YEAR
    preview_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.group_by not in GROUPINGS:
            raise ValidationError(
                f"Collection '{self.name}': group_by must be one of {GROUPINGS}, "
                f"got '{self.group_by}'"
            )
        if self.preview_limit is not None and self.preview_limit < 1:
            raise ValidationError(
                f"Collection '{self.name}': preview_limit must be positive"
            )
        if not self.metadata_filename:
            raise ValidationError(
                f"Collection '{self.name}': metadata_filename cannot be empty"
            )

    def with_overrides(self, overrides: Dict[str, Any], content_root: Path) -> CollectionConfig:
        """
        Return a copy with values from a site config mapping applied.

        Args:
            overrides: Mapping of field name to new value
            content_root: Base for relative root paths

        Returns:
            New CollectionConfig

        Raises:
            ValidationError: If a key is unknown or a value has the wrong shape
        """
        known = {f.name for f in fields(self)} - {"name"}
        unknown = set(overrides) - known
        if unknown:
            raise ValidationError(
                f"Collection '{self.name}': unknown config keys {sorted(unknown)}"
            )

        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key == "root":
                root = Path(value)
                changes[key] = root if root.is_absolute() else content_root / root
            elif key in ("required_fields", "image_fields"):
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ValidationError(
                        f"Collection '{self.name}': {key} must be a list of strings"
                    )
                changes[key] = tuple(value)
            elif key == "preview_limit":
                if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                    raise ValidationError(
                        f"Collection '{self.name}': preview_limit must be an integer"
                    )
                changes[key] = value
            else:
                changes[key] = value
        return replace(self, **changes)


def default_collections(content_root: Path) -> Dict[str, CollectionConfig]:
    """
    Build the built-in collection configurations.

    Args:
        content_root: Directory containing the collection directories

    Returns:
        Mapping of collection name to CollectionConfig
    """
    return {
        "blog": CollectionConfig(
            name="blog",
            root=content_root / "blog",
            metadata_filename="+page.md",
        ),
        "diary": CollectionConfig(
            name="diary",
            root=content_root / "diary",
            metadata_filename="+page.md",
        ),
        "memories": CollectionConfig(
            name="memories",
            root=content_root / "memories",
            metadata_filename="info.md",
            content_filename="content.md",
            group_by=GROUP_BY_DAY,
            preview_limit=4,
        ),
    }


def load_site_config(
    config_path: Optional[Path], content_root: Path
) -> Dict[str, CollectionConfig]:
    """
    Load collection configurations, applying an optional YAML site config.

    A missing file yields the defaults. Collections named in the file that
    are not built in are created from scratch and must give a root.

    Args:
        config_path: Path to the YAML site config, or None
        content_root: Directory containing the collection directories

    Returns:
        Mapping of collection name to CollectionConfig

    Raises:
        ValidationError: If the file is malformed or contains unknown keys
    """
    collections = default_collections(content_root)
    if config_path is None or not config_path.exists():
        return collections

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid site config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Site config {config_path} must be a mapping")

    section = data.get("collections") or {}
    if not isinstance(section, dict):
        raise ValidationError("'collections' must be a mapping of name to settings")

    for name, overrides in section.items():
        overrides = overrides or {}
        if not isinstance(overrides, dict):
            raise ValidationError(f"Settings for collection '{name}' must be a mapping")
        if name in collections:
            collections[name] = collections[name].with_overrides(overrides, content_root)
        else:
            if "root" not in overrides:
                raise ValidationError(f"New collection '{name}' needs a 'root'")
            base = CollectionConfig(name=name, root=content_root / name)
            collections[name] = base.with_overrides(overrides, content_root)

    return collections
