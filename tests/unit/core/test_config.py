"""
test_config.py
--------------
Unit tests for collection configuration and the YAML site config.
"""
import pytest
from pathlib import Path

from keepsake.core.config import (
    GROUP_BY_DAY,
    GROUP_BY_YEAR,
    CollectionConfig,
    default_collections,
    load_site_config,
)
from keepsake.core.exceptions import ValidationError


class TestCollectionConfig:
    """Test CollectionConfig construction."""

    def test_defaults(self, tmp_path):
        config = CollectionConfig(name="blog", root=tmp_path)
        assert config.metadata_filename == "+page.md"
        assert config.required_fields == ("title", "date")
        assert config.image_fields == ("heroImage", "coverImage", "featuredImage")
        assert config.image_dir == "img"
        assert config.group_by == GROUP_BY_YEAR
        assert config.preview_limit is None

    def test_invalid_group_by(self, tmp_path):
        with pytest.raises(ValidationError, match="group_by"):
            CollectionConfig(name="blog", root=tmp_path, group_by="week")

    def test_invalid_preview_limit(self, tmp_path):
        with pytest.raises(ValidationError, match="preview_limit"):
            CollectionConfig(name="blog", root=tmp_path, preview_limit=0)

    def test_empty_metadata_filename(self, tmp_path):
        with pytest.raises(ValidationError):
            CollectionConfig(name="blog", root=tmp_path, metadata_filename="")

    def test_is_frozen(self, tmp_path):
        config = CollectionConfig(name="blog", root=tmp_path)
        with pytest.raises(Exception):
            config.name = "diary"


class TestDefaultCollections:
    """Test the built-in collections."""

    def test_names_and_roots(self, tmp_path):
        collections = default_collections(tmp_path)
        assert set(collections) == {"blog", "diary", "memories"}
        assert collections["diary"].root == tmp_path / "diary"

    def test_memories_settings(self, tmp_path):
        memories = default_collections(tmp_path)["memories"]
        assert memories.metadata_filename == "info.md"
        assert memories.content_filename == "content.md"
        assert memories.group_by == GROUP_BY_DAY
        assert memories.preview_limit == 4

    def test_blog_groups_by_year(self, tmp_path):
        assert default_collections(tmp_path)["blog"].group_by == GROUP_BY_YEAR


class TestLoadSiteConfig:
    """Test load_site_config."""

    def test_missing_file_returns_defaults(self, tmp_path):
        collections = load_site_config(tmp_path / "nope.yaml", tmp_path)
        assert collections == default_collections(tmp_path)

    def test_none_path_returns_defaults(self, tmp_path):
        assert load_site_config(None, tmp_path) == default_collections(tmp_path)

    def test_overrides_applied(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text(
            "collections:\n"
            "  blog:\n"
            "    root: posts\n"
            "    preview_limit: 2\n"
            "    image_fields: [featuredImage]\n",
            encoding="utf-8",
        )
        blog = load_site_config(config_file, tmp_path)["blog"]
        assert blog.root == tmp_path / "posts"
        assert blog.preview_limit == 2
        assert blog.image_fields == ("featuredImage",)

    def test_absolute_root_kept(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        elsewhere = tmp_path / "elsewhere"
        config_file.write_text(f"collections:\n  diary:\n    root: {elsewhere}\n", encoding="utf-8")
        assert load_site_config(config_file, Path("/unused"))["diary"].root == elsewhere

    def test_new_collection(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text(
            "collections:\n  notes:\n    root: notes\n    group_by: day\n", encoding="utf-8"
        )
        collections = load_site_config(config_file, tmp_path)
        assert collections["notes"].group_by == GROUP_BY_DAY
        assert "blog" in collections

    def test_new_collection_needs_root(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text("collections:\n  notes:\n    group_by: day\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="root"):
            load_site_config(config_file, tmp_path)

    def test_unknown_key_rejected(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text("collections:\n  blog:\n    colour: red\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="colour"):
            load_site_config(config_file, tmp_path)

    def test_bad_field_type_rejected(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text("collections:\n  blog:\n    required_fields: 3\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="required_fields"):
            load_site_config(config_file, tmp_path)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text("collections: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Invalid site config"):
            load_site_config(config_file, tmp_path)

    def test_non_mapping(self, tmp_path):
        config_file = tmp_path / "keepsake.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_site_config(config_file, tmp_path)
