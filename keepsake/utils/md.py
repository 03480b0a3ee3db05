#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for Keepsake.

Provides functions for:
- Splitting a Markdown file into YAML front matter and body
- Parsing the front matter into a dictionary
- Rendering Markdown bodies to HTML

Intended for use by the ContentEntry dataclass and the front matter
validator.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List, Tuple

# --- Third party imports ---
import yaml
from markdown_it import MarkdownIt

# --- Local imports ---
from keepsake.core.exceptions import EntryParseError, EntryValidationError

_renderer = MarkdownIt("commonmark").enable("table").enable("strikethrough")


# ----- YAML Frontmatter Parsing -----
def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    A byte-order mark and blank lines before the opening marker are ignored.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if no frontmatter)
        - body_lines: List of body content lines

    Examples:
        >>> content = "---\\ntitle: Hello\\n---\\n\\nBody text"
        >>> fm, body = split_frontmatter(content)
        >>> fm
        'title: Hello'
        >>> body
        ['Body text']
    """
    lines = content.lstrip("\ufeff").splitlines()

    start = 0
    while start < len(lines) and lines[start].strip() == "":
        start += 1

    if start >= len(lines) or lines[start].strip() != "---":
        return "", lines

    # Find closing ---
    frontmatter_end = None
    for i in range(start + 1, len(lines)):
        if lines[i].strip() == "---":
            frontmatter_end = i
            break

    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[start + 1 : frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    # Remove empty lines at start of body
    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def parse_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    """
    Parse the YAML front matter of a Markdown document.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (metadata, body_text)

    Raises:
        EntryValidationError: If the document has no front matter block
        EntryParseError: If the YAML is malformed or not a mapping
    """
    frontmatter_text, body_lines = split_frontmatter(content)

    if not frontmatter_text.strip():
        raise EntryValidationError("No YAML frontmatter found (must start with ---)")

    try:
        metadata: Any = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        raise EntryParseError(f"Invalid YAML frontmatter: {e}") from e
    except ValueError as e:
        # Timestamp-shaped values that are not real dates (2024-13-45)
        raise EntryParseError(f"Invalid value in frontmatter: {e}") from e

    if not isinstance(metadata, dict):
        raise EntryParseError("YAML frontmatter must be a dictionary")

    return metadata, "\n".join(body_lines)


# ----- Rendering -----
def render_markdown(text: str) -> str:
    """
    Render a Markdown body to HTML.

    Args:
        text: Markdown source

    Returns:
        HTML string (empty for blank input)
    """
    if not text.strip():
        return ""
    return _renderer.render(text)
