#!/usr/bin/env python3
"""
text.py
-------
String helpers for slugs and image alt text.

Usage:
    from keepsake.utils.text import slugify, alt_from_filename

    slugify("Summer Trip 2024")        # 'summer-trip-2024'
    alt_from_filename("img/beach_day.jpg")  # 'Beach Day'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata
from pathlib import PurePosixPath


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to a URL- and filesystem-safe slug.

    Args:
        text: Input text to slugify
        max_length: Maximum slug length (default 200)

    Returns:
        Slugified string

    Examples:
        >>> slugify("Café Trip")
        'cafe-trip'
        >>> slugify("  --Hello, World!--  ")
        'hello-world'
    """
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = re.sub(r"-{2,}", "-", text).strip("-")
    return text[:max_length].rstrip("-")


def is_valid_slug(slug: str) -> bool:
    """
    Check that a slug can safely name an entry directory.

    Rejects empty values, path separators, and names starting with '.'.
    """
    if not slug or slug.startswith("."):
        return False
    return "/" not in slug and "\\" not in slug and "\x00" not in slug


def alt_from_filename(filename: str) -> str:
    """
    Generate alt text from an image filename.

    Drops directories and the extension, turns '_' and '-' into spaces and
    title-cases each word.

    Examples:
        >>> alt_from_filename("img/beach_day-2.jpg")
        'Beach Day 2'
        >>> alt_from_filename("photo")
        'Photo'
    """
    name = PurePosixPath(filename).name
    stem = name.rsplit(".", 1)[0] if "." in name.lstrip(".") else name
    stem = re.sub(r"[_-]+", " ", stem)
    stem = re.sub(r"\b\w", lambda m: m.group(0).upper(), stem)
    return " ".join(stem.split())
