#!/usr/bin/env python3
"""
index.py
--------
Asset index: logical asset path → deployable URL.

The index is built once per build (or loaded from a manifest written by a
previous build) and handed to every CollectionResolver. Resolving an image is
a dictionary lookup; a miss is a miss, never an exception.

Keys are POSIX paths relative to the content root:

    memories/summer-trip/img/beach.jpg

Values are site-relative URLs. With hashing enabled, the file name carries
the first eight hex digits of its SHA-256 digest so that changed files get new
URLs:

    /assets/memories/summer-trip/img/beach.3f9a1c2e.jpg

Usage:
    index = AssetIndex.build(CONTENT_DIR)
    index.lookup("blog/hello/img/cover.png")
    index.publish(PUBLIC_ASSETS_DIR)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import hashlib
import json
import shutil
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

# --- Local imports ---
from keepsake.core.exceptions import AssetIndexError
from keepsake.core.logging_manager import KeepsakeLogger, safe_logger
from keepsake.core.cli import ExportStats
from keepsake.utils.fs import get_file_hash, is_image_file
from keepsake.utils.text import slugify

DEFAULT_URL_PREFIX = "/assets"
HASH_LENGTH = 8


def hashed_name(path: Path) -> str:
    """
    Build a content-addressed file name: <slug(stem)>.<hash8><ext>.

    Args:
        path: Source file

    Returns:
        File name such as 'beach-day.3f9a1c2e.jpg'
    """
    digest = hashlib.sha256(path.read_bytes()).hexdigest()[:HASH_LENGTH]
    stem = slugify(path.stem) or "asset"
    return f"{stem}.{digest}{path.suffix.lower()}"


class AssetIndex:
    """
    Immutable mapping from logical asset path to deployable URL.

    Attributes:
        root: Content root the keys are relative to (None for a bare mapping)
    """

    def __init__(self, mapping: Mapping[str, str], root: Optional[Path] = None) -> None:
        """
        Args:
            mapping: Logical path → URL
            root: Content root the logical paths are relative to
        """
        self._urls: Mapping[str, str] = MappingProxyType(
            {self.normalize_key(k): v for k, v in mapping.items()}
        )
        self.root = Path(root) if root is not None else None

    # ---- Construction ----
    @classmethod
    def build(
        cls,
        content_root: Path,
        url_prefix: str = DEFAULT_URL_PREFIX,
        hashed: bool = True,
        logger: Optional[KeepsakeLogger] = None,
    ) -> AssetIndex:
        """
        Scan a content root for image files and index them.

        Args:
            content_root: Directory holding the collections
            url_prefix: URL path every asset URL starts with
            hashed: Append a content hash to each file name
            logger: Optional logger

        Returns:
            AssetIndex rooted at content_root (empty if the root is missing)

        Raises:
            AssetIndexError: If a file cannot be read while hashing
        """
        log = safe_logger(logger)
        content_root = Path(content_root)
        prefix = "/" + url_prefix.strip("/") if url_prefix.strip("/") else ""

        if not content_root.exists():
            log.log_warning("Content root not found, asset index is empty",
                            {"content_root": str(content_root)})
            return cls({}, root=content_root)

        mapping: Dict[str, str] = {}
        for path in sorted(content_root.rglob("*")):
            if not path.is_file() or not is_image_file(path):
                continue
            rel = path.relative_to(content_root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            key = rel.as_posix()
            try:
                name = hashed_name(path) if hashed else path.name
            except OSError as e:
                raise AssetIndexError(f"Cannot read asset {path}: {e}") from e
            url_path = PurePosixPath(key).parent / name
            mapping[key] = f"{prefix}/{url_path.as_posix()}"

        log.log_operation("asset_index_built", {
            "content_root": str(content_root),
            "assets": len(mapping),
            "hashed": hashed,
        })
        return cls(mapping, root=content_root)

    @classmethod
    def from_manifest(cls, manifest_path: Path, root: Optional[Path] = None) -> AssetIndex:
        """
        Load an index from a JSON manifest written by to_manifest().

        Raises:
            AssetIndexError: If the manifest is missing or malformed
        """
        try:
            data = json.loads(Path(manifest_path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise AssetIndexError(f"Cannot read asset manifest {manifest_path}: {e}") from e

        assets = data.get("assets") if isinstance(data, dict) else None
        if not isinstance(assets, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in assets.items()
        ):
            raise AssetIndexError(
                f"Asset manifest {manifest_path} must contain an 'assets' mapping of strings"
            )
        if root is None and data.get("root"):
            root = Path(data["root"])
        return cls(assets, root=root)

    # ---- Queries ----
    @staticmethod
    def normalize_key(key: str) -> str:
        """Normalize a logical path: forward slashes, no leading './' or '/'."""
        key = key.replace("\\", "/")
        while key.startswith("./"):
            key = key[2:]
        return key.lstrip("/")

    def lookup(self, key: str) -> Optional[str]:
        """Return the URL for a logical path, or None."""
        return self._urls.get(self.normalize_key(key))

    def key_for(self, path: Path) -> Optional[str]:
        """
        Logical key of a filesystem path under the index root.

        Returns:
            POSIX key, or None if the index has no root or the path is outside it
        """
        if self.root is None:
            return None
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.normalize_key(key) in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._urls.items())

    # ---- Output ----
    def to_manifest(self, manifest_path: Path) -> None:
        """
        Write the index as a JSON manifest.

        Raises:
            AssetIndexError: If the file cannot be written
        """
        data = {
            "root": str(self.root) if self.root is not None else None,
            "assets": dict(sorted(self._urls.items())),
        }
        try:
            Path(manifest_path).parent.mkdir(parents=True, exist_ok=True)
            Path(manifest_path).write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise AssetIndexError(f"Cannot write asset manifest {manifest_path}: {e}") from e

    def publish(
        self, out_dir: Path, logger: Optional[KeepsakeLogger] = None
    ) -> ExportStats:
        """
        Copy every indexed file to the path its URL names under out_dir.

        Files whose destination already has identical content are left alone.

        Args:
            out_dir: Public output directory (URL '/' maps to out_dir)
            logger: Optional logger

        Returns:
            ExportStats with written/unchanged counts

        Raises:
            AssetIndexError: If the index has no root or a copy fails
        """
        log = safe_logger(logger)
        if self.root is None:
            raise AssetIndexError("Cannot publish an asset index without a content root")

        stats = ExportStats()
        out_dir = Path(out_dir)
        for key, url in self._urls.items():
            if "://" in url:
                continue
            src = self.root / key
            dest = out_dir / url.lstrip("/")
            try:
                if dest.is_file() and get_file_hash(dest) == get_file_hash(src):
                    stats.files_unchanged += 1
                    continue
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dest)
                stats.files_written += 1
            except OSError as e:
                log.log_error(e, {"operation": "publish_assets", "asset": key})
                raise AssetIndexError(f"Cannot publish asset {key}: {e}") from e

        log.log_operation("assets_published", {"out_dir": str(out_dir), **stats.to_dict()})
        return stats
