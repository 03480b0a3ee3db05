#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for content discovery.

Functions:
    is_image_file: Check a filename against the recognised image extensions
    find_entry_dirs: Discover entry directories holding a metadata file
    find_image_filenames: Enumerate image files of one entry
    get_file_hash: Compute a SHA-256 digest for content-addressed URLs

Usage:
    from keepsake.utils.fs import find_entry_dirs, find_image_filenames

    dirs = find_entry_dirs(Path("content/blog"), "+page.md")
    images = find_image_filenames(dirs[0])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import hashlib
from pathlib import Path
from typing import List

IMAGE_EXTENSIONS = frozenset(
    {".avif", ".gif", ".heif", ".jpeg", ".jpg", ".png", ".tiff", ".webp", ".svg"}
)


def is_image_file(name: str | Path) -> bool:
    """Return True if the name ends in a recognised image extension."""
    return Path(name).suffix.lower() in IMAGE_EXTENSIONS


def find_entry_dirs(root: Path, metadata_filename: str) -> List[Path]:
    """
    Find entry directories directly under root that hold a metadata file.

    Hidden directories (leading '.') are ignored.

    Args:
        root: Collection root directory
        metadata_filename: File every entry directory must contain

    Returns:
        Sorted list of entry directories; empty if root does not exist

    Raises:
        OSError: If root exists but cannot be listed
    """
    if not root.exists():
        return []
    return sorted(
        child
        for child in root.iterdir()
        if child.is_dir()
        and not child.name.startswith(".")
        and (child / metadata_filename).is_file()
    )


def find_image_filenames(entry_dir: Path, image_dir: str = "img") -> List[str]:
    """
    Enumerate image files belonging to an entry.

    Looks in the entry's image subdirectory first, then in the entry
    directory itself. Names are relative to the entry directory.

    Args:
        entry_dir: Entry directory
        image_dir: Name of the conventional image subdirectory

    Returns:
        Sorted filenames, e.g. ['img/a.jpg', 'img/b.png', 'cover.webp']
    """
    found: List[str] = []
    sub = entry_dir / image_dir
    if sub.is_dir():
        found.extend(
            f"{image_dir}/{p.name}"
            for p in sorted(sub.iterdir())
            if p.is_file() and is_image_file(p)
        )
    if entry_dir.is_dir():
        found.extend(
            p.name
            for p in sorted(entry_dir.iterdir())
            if p.is_file() and is_image_file(p)
        )
    return found


def get_file_hash(file_path: str | Path) -> str:
    """
    Compute SHA-256 hash of a file.

    Args:
        file_path: Path to the file

    Returns:
        Hexadecimal SHA-256 digest of the file contents

    Raises:
        FileNotFoundError: If file does not exist or is not a regular file
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found or not a regular file: {path}")
    return hashlib.sha256(path.read_bytes()).hexdigest()
