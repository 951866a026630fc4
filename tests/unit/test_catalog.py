"""Tests for the YAML agency catalog."""

from pathlib import Path
from textwrap import dedent

import pytest

from agencymatch.core.catalog import load_catalog
from agencymatch.core.schemas import Category, ThinkingStyle


class TestLoadCatalog:
    def test_loads_profiles(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text(dedent("""\
            agencies:
              - id: a1
                name: Alpha
                categories: [SEO]
                budget_min: 1000
                budget_max: 5000
                thinking_style: data
              - id: a2
                name: Beta
                categories: [Branding, PR]
                budget_min: 2000
                budget_max: 9000
                thinking_style: creative
                areas: [Remote]
        """))
        profiles = load_catalog(catalog_file)
        assert [p.id for p in profiles] == ["a1", "a2"]
        assert profiles[1].categories == [Category.BRANDING, Category.PR]
        assert profiles[1].thinking_style is ThinkingStyle.CREATIVE

    def test_empty_file(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text("")
        assert load_catalog(catalog_file) == []

    def test_agencies_not_a_list(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text("agencies:\n  id: a1\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_catalog(catalog_file)

    def test_top_level_list_rejected(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text(dedent("""\
            - id: a
              budget_min: 1
              budget_max: 2
              thinking_style: data
        """))
        with pytest.raises(ValueError, match="must be a mapping"):
            load_catalog(catalog_file)

    def test_top_level_scalar_rejected(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text("just some text\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_catalog(catalog_file)

    def test_yaml_syntax_error(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text("agencies: [unclosed\n")
        with pytest.raises(ValueError, match="not valid YAML"):
            load_catalog(catalog_file)

    def test_invalid_record_names_index(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "agencies.yaml"
        catalog_file.write_text(dedent("""\
            agencies:
              - id: ok
                budget_min: 1
                budget_max: 2
                thinking_style: data
              - id: inverted
                budget_min: 9000
                budget_max: 10
                thinking_style: data
        """))
        with pytest.raises(ValueError, match="index 1"):
            load_catalog(catalog_file)

    def test_file_not_found(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog("/nonexistent/agencies.yaml")

    def test_load_example_catalog(self) -> None:
        """The shipped example config/agencies.yaml must be valid."""
        profiles = load_catalog("config/agencies.yaml")
        assert len(profiles) == 4
        assert profiles[0].id == "metricminds"
