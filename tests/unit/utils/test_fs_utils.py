"""
test_fs_utils.py
----------------
Unit tests for keepsake.utils.fs module.
"""
import hashlib
import pytest

from keepsake.utils.fs import (
    find_entry_dirs,
    find_image_filenames,
    get_file_hash,
    is_image_file,
)


class TestIsImageFile:
    """Test is_image_file function."""

    @pytest.mark.parametrize("name", ["a.jpg", "a.JPEG", "img/b.png", "c.webp", "d.avif", "e.svg"])
    def test_images(self, name):
        assert is_image_file(name)

    @pytest.mark.parametrize("name", ["info.md", "notes.txt", "jpg", "a.jpg.bak"])
    def test_non_images(self, name):
        assert not is_image_file(name)


class TestFindEntryDirs:
    """Test find_entry_dirs function."""

    def test_missing_root(self, tmp_dir):
        assert find_entry_dirs(tmp_dir / "missing", "+page.md") == []

    def test_finds_sorted_entries(self, tmp_dir):
        for slug in ("b-post", "a-post"):
            (tmp_dir / slug).mkdir()
            (tmp_dir / slug / "+page.md").write_text("---\n---\n")
        assert [d.name for d in find_entry_dirs(tmp_dir, "+page.md")] == ["a-post", "b-post"]

    def test_skips_dirs_without_metadata(self, tmp_dir):
        (tmp_dir / "drafts").mkdir()
        (tmp_dir / "post").mkdir()
        (tmp_dir / "post" / "info.md").write_text("")
        assert find_entry_dirs(tmp_dir, "+page.md") == []
        assert [d.name for d in find_entry_dirs(tmp_dir, "info.md")] == ["post"]

    def test_skips_hidden_and_files(self, tmp_dir):
        (tmp_dir / ".cache").mkdir()
        (tmp_dir / ".cache" / "+page.md").write_text("")
        (tmp_dir / "+page.md").write_text("")
        assert find_entry_dirs(tmp_dir, "+page.md") == []


class TestFindImageFilenames:
    """Test find_image_filenames function."""

    def test_image_dir_first(self, tmp_dir):
        (tmp_dir / "img").mkdir()
        for name in ("img/b.jpg", "img/a.png", "cover.webp", "+page.md", "img/notes.txt"):
            (tmp_dir / name).write_bytes(b"x")
        assert find_image_filenames(tmp_dir) == ["img/a.png", "img/b.jpg", "cover.webp"]

    def test_custom_image_dir(self, tmp_dir):
        (tmp_dir / "photos").mkdir()
        (tmp_dir / "photos" / "p.jpg").write_bytes(b"x")
        assert find_image_filenames(tmp_dir, "photos") == ["photos/p.jpg"]

    def test_missing_entry_dir(self, tmp_dir):
        assert find_image_filenames(tmp_dir / "missing") == []


class TestGetFileHash:
    """Test get_file_hash function."""

    def test_sha256(self, tmp_dir):
        path = tmp_dir / "a.jpg"
        path.write_bytes(b"pixels")
        assert get_file_hash(path) == hashlib.sha256(b"pixels").hexdigest()

    def test_missing_file(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            get_file_hash(tmp_dir / "missing.jpg")
