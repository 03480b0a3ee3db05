"""
Utilities package for Keepsake.

This package provides commonly-used utilities organized by domain:
- md: Front matter parsing and Markdown rendering
- fs: Entry and image discovery, file hashing
- text: Slugs and alt text

Import commonly-used utilities directly from this package:
    from keepsake.utils import parse_frontmatter, find_entry_dirs

Or import specific modules:
    from keepsake.utils import md, fs, text
"""

# Markdown and YAML utilities
from .md import (
    split_frontmatter,
    parse_frontmatter,
    render_markdown,
)

# Filesystem utilities
from .fs import (
    IMAGE_EXTENSIONS,
    is_image_file,
    find_entry_dirs,
    find_image_filenames,
    get_file_hash,
)

# Text utilities
from .text import (
    slugify,
    is_valid_slug,
    alt_from_filename,
)

__all__ = [
    "split_frontmatter",
    "parse_frontmatter",
    "render_markdown",
    "IMAGE_EXTENSIONS",
    "is_image_file",
    "find_entry_dirs",
    "find_image_filenames",
    "get_file_hash",
    "slugify",
    "is_valid_slug",
    "alt_from_filename",
]
