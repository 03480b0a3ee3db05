#!/usr/bin/env python3
"""
content_entry.py
-------------------
Dataclasses representing one content entry and its images.

A ContentEntry is built from a Markdown metadata file with YAML front matter:

    ---
    title: Summer Trip
    date: 2024-05-01
    description: A week by the sea
    heroImage: img/beach.jpg
    images:
      - filename: img/beach.jpg
        alt: The beach at dusk
      - filename: img/dunes.jpg
    ---

    Body text...

Entries are immutable. ContentEntry.from_file() parses and validates the
metadata; the resolver attaches resolved images with with_images().
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

# --- Local imports ---
from keepsake.core.exceptions import (
    EntryParseError,
    EntryValidationError,
    ValidationError,
)
from keepsake.core.validators import DataValidator
from keepsake.utils import md
from keepsake.utils.text import alt_from_filename

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:
    """Copy of a YAML value with dates as ISO strings and string keys."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_json_safe(v) for v in value]
    return value


@dataclass(frozen=True)
class ImageRef:
    """
    A resolved image reference.

    Attributes:
        filename: Reference as written in the metadata (or found on disk)
        src: Deployable URL
        alt: Alt text
    """

    filename: str
    src: str
    alt: str

    def to_dict(self) -> Dict[str, str]:
        return {"filename": self.filename, "src": self.src, "alt": self.alt}


@dataclass(frozen=True)
class ContentEntry:
    """
    One blog post, diary entry or memoir.

    Attributes:
        slug: Directory name of the entry
        collection: Name of the owning collection
        title: Entry title (required)
        date: Entry date (required)
        description: Short description, falling back to the excerpt
        excerpt: Longer excerpt
        edited: Dates the entry was edited
        images: Resolved images in candidate order
        hero: Designated hero/cover image
        missing_images: References that could not be resolved
        body: Markdown body
        metadata: Raw front matter
        source_path: Metadata file the entry was read from
    """

    slug: str
    collection: str
    title: str
    date: date
    description: Optional[str] = None
    excerpt: Optional[str] = None
    edited: Tuple[date, ...] = ()
    images: Tuple[ImageRef, ...] = ()
    hero: Optional[ImageRef] = None
    missing_images: Tuple[str, ...] = ()
    body: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    source_path: Optional[Path] = field(default=None, compare=False)

    # ---- Construction Methods ----
    @classmethod
    def from_file(
        cls,
        file_path: Path,
        slug: str,
        collection: str,
        required_fields: Iterable[str] = ("title", "date"),
        content_path: Optional[Path] = None,
    ) -> ContentEntry:
        """
        Parse a metadata file into an entry without images.

        Args:
            file_path: Markdown file with YAML front matter
            slug: Entry identifier
            collection: Collection name
            required_fields: Fields that must be present and non-empty
            content_path: Optional separate body file; used when it exists

        Returns:
            Parsed ContentEntry

        Raises:
            FileNotFoundError: If the metadata file does not exist
            EntryParseError: If the file cannot be read or the YAML is malformed
            EntryValidationError: If required fields are missing or invalid
        """
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EntryParseError(f"Cannot read {file_path}: {e}") from e

        metadata, body = md.parse_frontmatter(content)

        if content_path is not None and content_path.is_file():
            try:
                body = content_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise EntryParseError(f"Cannot read {content_path}: {e}") from e

        return cls.from_metadata(
            metadata,
            slug=slug,
            collection=collection,
            required_fields=required_fields,
            body=body,
            source_path=file_path,
        )

    @classmethod
    def from_metadata(
        cls,
        metadata: Dict[str, Any],
        slug: str,
        collection: str,
        required_fields: Iterable[str] = ("title", "date"),
        body: str = "",
        source_path: Optional[Path] = None,
    ) -> ContentEntry:
        """
        Validate front matter and build an entry.

        Raises:
            EntryValidationError: If required fields are missing or invalid
        """
        try:
            DataValidator.validate_required_fields(metadata, required_fields)
        except ValidationError as e:
            raise EntryValidationError(str(e)) from e

        title = DataValidator.normalize_string(metadata.get("title"))
        if title is None:
            raise EntryValidationError(f"Invalid title: {metadata.get('title')!r}")

        entry_date = DataValidator.normalize_date(metadata.get("date"))
        if entry_date is None:
            raise EntryValidationError(f"Invalid date format: {metadata.get('date')!r}")

        edited_raw = metadata.get("edited")
        edited = DataValidator.normalize_date_list(edited_raw)
        if edited_raw is not None:
            declared = len(edited_raw) if isinstance(edited_raw, (list, tuple)) else 1
            if len(edited) != declared:
                logger.warning(f"[{slug}] Dropped unparseable 'edited' dates: {edited_raw!r}")

        excerpt = DataValidator.normalize_string(metadata.get("excerpt"))
        description = DataValidator.normalize_string(metadata.get("description")) or excerpt

        return cls(
            slug=slug,
            collection=collection,
            title=title,
            date=entry_date,
            description=description,
            excerpt=excerpt,
            edited=tuple(edited),
            body=body,
            metadata=dict(metadata),
            source_path=source_path,
        )

    def with_images(
        self,
        images: Iterable[ImageRef],
        hero: Optional[ImageRef],
        missing: Iterable[str] = (),
    ) -> ContentEntry:
        """Return a copy carrying resolved images."""
        return replace(
            self,
            images=tuple(images),
            hero=hero,
            missing_images=tuple(missing),
        )

    # ---- Metadata helpers ----
    def declared_alt_texts(self) -> Dict[str, str]:
        """Map filename → alt text from the 'images' front matter list."""
        alts: Dict[str, str] = {}
        images = self.metadata.get("images")
        if not isinstance(images, list):
            return alts
        for item in images:
            if isinstance(item, dict):
                filename = item.get("filename")
                alt = DataValidator.normalize_string(item.get("alt"))
                if isinstance(filename, str) and filename.strip() and alt:
                    alts.setdefault(filename.strip(), alt)
        return alts

    def alt_for(self, filename: str, declared: Optional[Dict[str, str]] = None) -> str:
        """
        Alt text for an image: declared, else generated, else the title.
        """
        declared = self.declared_alt_texts() if declared is None else declared
        return declared.get(filename) or alt_from_filename(filename) or self.title

    # ---- Derived views ----
    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def gallery(self) -> List[ImageRef]:
        """Images other than the hero."""
        if self.hero is None:
            return list(self.images)
        return [img for img in self.images if img.src != self.hero.src]

    def previews(self, limit: Optional[int] = None) -> List[ImageRef]:
        """Hero first, then the gallery, truncated to limit."""
        ordered = ([self.hero] if self.hero else []) + self.gallery
        return ordered if limit is None else ordered[:limit]

    @property
    def body_html(self) -> str:
        return md.render_markdown(self.body)

    # ---- Serialization ----
    def to_summary(self) -> Dict[str, Any]:
        """Slim record for navigation lists."""
        return {"slug": self.slug, "title": self.title, "date": self.date.isoformat()}

    def to_dict(
        self, include_body: bool = False, preview_limit: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Page data for this entry.

        Args:
            include_body: Add Markdown body and rendered HTML
            preview_limit: Number of preview images to include

        Returns:
            JSON-serializable dictionary
        """
        data: Dict[str, Any] = {
            "slug": self.slug,
            "collection": self.collection,
            "title": self.title,
            "date": self.date.isoformat(),
            "description": self.description,
            "excerpt": self.excerpt,
            "edited": [d.isoformat() for d in self.edited],
            "hero": self.hero.to_dict() if self.hero else None,
            "resolvedImageUrl": self.hero.src if self.hero else None,
            "images": [img.to_dict() for img in self.images],
            "gallery": [img.to_dict() for img in self.gallery],
            "previews": [img.to_dict() for img in self.previews(preview_limit)],
            "metadata": _json_safe(self.metadata),
        }
        if include_body:
            data["body"] = self.body
            data["html"] = self.body_html
        return data
