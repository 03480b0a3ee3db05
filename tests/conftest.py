"""
conftest.py
-----------
Shared pytest fixtures for Keepsake tests.

Provides fixtures for:
- Temporary directories and content trees
- Sample front matter
- Asset indexes and resolvers over the sample tree
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Dict, Iterable, Optional

from keepsake.assets.index import AssetIndex
from keepsake.core.config import default_collections
from keepsake.pipeline.resolver import CollectionResolver


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_root(tmp_dir):
    """Empty content root with the three collection directories."""
    root = tmp_dir / "content"
    for name in ("blog", "diary", "memories"):
        (root / name).mkdir(parents=True)
    return root


# ----- Content Builders -----

def write_entry(
    collection_dir: Path,
    slug: str,
    frontmatter: str,
    body: str = "",
    images: Iterable[str] = (),
    metadata_filename: str = "+page.md",
    content: Optional[str] = None,
) -> Path:
    """
    Write one entry directory.

    Args:
        collection_dir: Collection root
        slug: Entry directory name
        frontmatter: YAML text placed between the --- markers
        body: Markdown body after the front matter
        images: Image paths relative to the entry directory (e.g. 'img/a.jpg')
        metadata_filename: Name of the metadata file
        content: Optional separate content.md text

    Returns:
        Path to the entry directory
    """
    entry_dir = collection_dir / slug
    entry_dir.mkdir(parents=True, exist_ok=True)
    (entry_dir / metadata_filename).write_text(
        f"---\n{frontmatter.strip()}\n---\n\n{body}", encoding="utf-8"
    )
    for image in images:
        path = entry_dir / image
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(f"image:{slug}/{image}".encode("utf-8"))
    if content is not None:
        (entry_dir / "content.md").write_text(content, encoding="utf-8")
    return entry_dir


@pytest.fixture
def entry_writer():
    """The write_entry helper as a fixture."""
    return write_entry


# ----- Sample Front Matter -----

@pytest.fixture
def minimal_frontmatter():
    """Front matter with only the required fields."""
    return "title: Hello\ndate: 2024-01-15"


@pytest.fixture
def complex_frontmatter():
    """Front matter with every recognised field populated."""
    return """
title: Summer Trip
date: 2024-05-01
description: A week by the sea
excerpt: We drove to the coast and stayed for a week.
edited:
  - 2024-05-03
  - 2024-06-10
heroImage: img/a.jpg
images:
  - filename: img/a.jpg
    alt: The bay at dawn
  - filename: img/b.jpg
"""


# ----- Sample Site -----

@pytest.fixture
def sample_site(content_root):
    """
    Content tree covering the common cases.

    blog:
        summer-trip   2024-05-01  heroImage a.jpg, images a.jpg + b.jpg
        new-year      2023-01-10  no images
        broken        invalid YAML
    diary:
        2024-03-02    2024-03-02  image on disk only
        2024-03-01    2024-03-01
    memories:
        lake-weekend  2024-07-14  coverImage + 5 photos, content.md
        city-walk     2024-07-02  3 photos
        first-snow    2023-12-24  1 photo
    """
    blog = content_root / "blog"
    write_entry(
        blog, "summer-trip",
        "title: Summer Trip\ndate: 2024-05-01\nheroImage: a.jpg\n"
        "images:\n  - filename: a.jpg\n    alt: The bay\n  - filename: b.jpg",
        body="# Summer\n\nWe went to the sea.\n",
        images=["img/a.jpg", "img/b.jpg"],
    )
    write_entry(blog, "new-year", "title: New Year\ndate: 2023-01-10", body="Resolutions.\n")
    write_entry(blog, "broken", "title: [unclosed\ndate: 2024-02-02")

    diary = content_root / "diary"
    write_entry(
        diary, "2024-03-02", "title: Rainy Saturday\ndate: 2024-03-02",
        images=["img/umbrella_walk.jpg"],
    )
    write_entry(diary, "2024-03-01", "title: First of March\ndate: 2024-03-01")

    memories = content_root / "memories"
    write_entry(
        memories, "lake-weekend",
        "title: Lake Weekend\ndate: 2024-07-14\ncoverImage: img/cover.jpg",
        images=["img/cover.jpg", "img/p1.jpg", "img/p2.jpg", "img/p3.jpg", "img/p4.jpg"],
        metadata_filename="info.md",
        content="Two days at the lake.\n",
    )
    write_entry(
        memories, "city-walk", "title: City Walk\ndate: 2024-07-02",
        images=["img/c1.jpg", "img/c2.jpg", "img/c3.jpg"],
        metadata_filename="info.md",
    )
    write_entry(
        memories, "first-snow", "title: First Snow\ndate: 2023-12-24",
        images=["img/snow.jpg"],
        metadata_filename="info.md",
    )
    return content_root


@pytest.fixture
def sample_index(sample_site):
    """Hashed asset index over the sample site."""
    return AssetIndex.build(sample_site)


@pytest.fixture
def collections(sample_site):
    """Default collection configs rooted at the sample site."""
    return default_collections(sample_site)


@pytest.fixture
def resolvers(collections, sample_index) -> Dict[str, CollectionResolver]:
    """One resolver per sample collection."""
    return {
        name: CollectionResolver(config, sample_index)
        for name, config in collections.items()
    }
