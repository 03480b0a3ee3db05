#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Keepsake project.

All project paths are Path objects resolved at import time, relative to the
project root:

    ROOT/
    ├── keepsake/      # Library code
    ├── content/       # Site content (blog, diary, memories)
    ├── build/         # Exported page data and published assets
    └── logs/          # Application logs

The content directory can be moved with the KEEPSAKE_CONTENT_DIR environment
variable; every collection root follows it.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/keepsake/core/paths.py.

    Returns:
        Path object for project root
    """
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Content ----
CONTENT_DIR = Path(os.environ.get("KEEPSAKE_CONTENT_DIR", ROOT / "content"))
BLOG_DIR = CONTENT_DIR / "blog"
DIARY_DIR = CONTENT_DIR / "diary"
MEMORIES_DIR = CONTENT_DIR / "memories"

# ---- Output ----
BUILD_DIR = ROOT / "build"
EXPORT_DIR = BUILD_DIR / "data"
PUBLIC_ASSETS_DIR = BUILD_DIR / "public"

# ---- Logs ----
LOG_DIR = ROOT / "logs"

# ---- Config ----
SITE_CONFIG_PATH = ROOT / "keepsake.yaml"
