"""
test_asset_index.py
-------------------
Unit tests for keepsake.assets.index.

Tests building the index from a content root, lookups, manifests and
publishing hashed files.
"""
import hashlib
import json
import pytest
from pathlib import Path

from keepsake.assets.index import AssetIndex, hashed_name
from keepsake.core.exceptions import AssetIndexError


def _digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()[:8]


@pytest.fixture
def asset_root(tmp_dir):
    """Content root with a few images and non-images."""
    root = tmp_dir / "content"
    img = root / "blog" / "hello" / "img"
    img.mkdir(parents=True)
    (img / "Beach Day.JPG").write_bytes(b"beach")
    (img / "cover.png").write_bytes(b"cover")
    (root / "blog" / "hello" / "+page.md").write_text("---\ntitle: x\n---\n")
    hidden = root / "blog" / ".drafts"
    hidden.mkdir()
    (hidden / "secret.jpg").write_bytes(b"secret")
    return root


class TestHashedName:
    """Test hashed_name function."""

    def test_format(self, tmp_dir):
        path = tmp_dir / "Beach Day.JPG"
        path.write_bytes(b"beach")
        assert hashed_name(path) == f"beach-day.{_digest(b'beach')}.jpg"

    def test_stable_for_identical_content(self, tmp_dir):
        a = tmp_dir / "a" / "photo.jpg"
        b = tmp_dir / "b" / "photo.jpg"
        for path in (a, b):
            path.parent.mkdir()
            path.write_bytes(b"same")
        assert hashed_name(a) == hashed_name(b)

    def test_changes_with_content(self, tmp_dir):
        path = tmp_dir / "photo.jpg"
        path.write_bytes(b"one")
        first = hashed_name(path)
        path.write_bytes(b"two")
        assert hashed_name(path) != first

    def test_unsluggable_stem(self, tmp_dir):
        path = tmp_dir / "___.png"
        path.write_bytes(b"x")
        assert hashed_name(path).startswith("asset.")


class TestBuild:
    """Test AssetIndex.build."""

    def test_indexes_images(self, asset_root):
        index = AssetIndex.build(asset_root)
        assert set(index) == {"blog/hello/img/Beach Day.JPG", "blog/hello/img/cover.png"}
        assert index.lookup("blog/hello/img/cover.png") == (
            f"/assets/blog/hello/img/cover.{_digest(b'cover')}.png"
        )

    def test_skips_hidden_directories(self, asset_root):
        assert "blog/.drafts/secret.jpg" not in AssetIndex.build(asset_root)

    def test_unhashed(self, asset_root):
        index = AssetIndex.build(asset_root, hashed=False)
        assert index.lookup("blog/hello/img/cover.png") == "/assets/blog/hello/img/cover.png"

    def test_url_prefix(self, asset_root):
        index = AssetIndex.build(asset_root, url_prefix="static/", hashed=False)
        assert index.lookup("blog/hello/img/cover.png") == "/static/blog/hello/img/cover.png"

    def test_empty_prefix(self, asset_root):
        index = AssetIndex.build(asset_root, url_prefix="", hashed=False)
        assert index.lookup("blog/hello/img/cover.png") == "/blog/hello/img/cover.png"

    def test_missing_root(self, tmp_dir):
        index = AssetIndex.build(tmp_dir / "missing")
        assert len(index) == 0


class TestLookup:
    """Test lookups and key normalisation."""

    @pytest.fixture
    def index(self, tmp_dir):
        return AssetIndex({"blog/a/img/x.jpg": "/assets/x.jpg"}, root=tmp_dir)

    @pytest.mark.parametrize("key", [
        "blog/a/img/x.jpg",
        "/blog/a/img/x.jpg",
        "./blog/a/img/x.jpg",
        "blog\\a\\img\\x.jpg",
    ])
    def test_normalised_keys(self, index, key):
        assert index.lookup(key) == "/assets/x.jpg"
        assert key in index

    def test_miss(self, index):
        assert index.lookup("blog/a/img/y.jpg") is None
        assert "blog/a/img/y.jpg" not in index
        assert 42 not in index

    def test_key_for(self, index, tmp_dir):
        assert index.key_for(tmp_dir / "blog" / "a") == "blog/a"
        assert index.key_for(tmp_dir.parent / "other") is None

    def test_key_for_without_root(self):
        assert AssetIndex({}).key_for(Path("x")) is None

    def test_copies_source_mapping(self, tmp_dir):
        source = {"a.jpg": "/a.jpg"}
        index = AssetIndex(source, root=tmp_dir)
        source["b.jpg"] = "/b.jpg"
        assert "b.jpg" not in index
        assert len(index) == 1


class TestManifest:
    """Test to_manifest / from_manifest."""

    def test_write_and_read(self, asset_root, tmp_dir):
        index = AssetIndex.build(asset_root)
        manifest = tmp_dir / "build" / "assets.json"
        index.to_manifest(manifest)

        data = json.loads(manifest.read_text(encoding="utf-8"))
        assert data["root"] == str(asset_root)
        assert list(data["assets"]) == sorted(data["assets"])

        loaded = AssetIndex.from_manifest(manifest)
        assert dict(loaded.items()) == dict(index.items())
        assert loaded.root == asset_root

    def test_missing_manifest(self, tmp_dir):
        with pytest.raises(AssetIndexError, match="Cannot read"):
            AssetIndex.from_manifest(tmp_dir / "missing.json")

    def test_malformed_manifest(self, tmp_dir):
        manifest = tmp_dir / "assets.json"
        manifest.write_text(json.dumps({"assets": ["a", "b"]}), encoding="utf-8")
        with pytest.raises(AssetIndexError, match="mapping"):
            AssetIndex.from_manifest(manifest)


class TestPublish:
    """Test AssetIndex.publish."""

    def test_copies_to_url_paths(self, asset_root, tmp_dir):
        index = AssetIndex.build(asset_root)
        out = tmp_dir / "public"
        stats = index.publish(out)

        assert stats.files_written == 2
        url = index.lookup("blog/hello/img/cover.png")
        assert (out / url.lstrip("/")).read_bytes() == b"cover"

    def test_second_publish_is_unchanged(self, asset_root, tmp_dir):
        index = AssetIndex.build(asset_root)
        out = tmp_dir / "public"
        index.publish(out)
        stats = index.publish(out)
        assert stats.files_written == 0
        assert stats.files_unchanged == 2

    def test_requires_root(self, tmp_dir):
        with pytest.raises(AssetIndexError, match="content root"):
            AssetIndex({"a.jpg": "/a.jpg"}).publish(tmp_dir)

    def test_missing_source(self, tmp_dir):
        index = AssetIndex({"gone.jpg": "/assets/gone.jpg"}, root=tmp_dir)
        with pytest.raises(AssetIndexError, match="gone.jpg"):
            index.publish(tmp_dir / "public")
