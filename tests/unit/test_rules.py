"""
Tests for SEO rules loading and validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from seometa.rules.loader import load_rules
from seometa.rules.models import DefaultsRules, SeoRules


class TestSeoRulesModel:
    """Tests for the rules schema."""

    def test_defaults(self) -> None:
        rules = SeoRules()

        assert rules.defaults.title is None
        assert rules.defaults.title_before is False
        assert rules.defaults.separator == " - "
        assert rules.defaults.description is None
        assert rules.defaults.keywords == []
        assert rules.defaults.canonical is False
        assert rules.defaults.robots_index is None
        assert rules.defaults.robots_follow is None
        assert rules.webmaster_tags == {}
        assert rules.add_notranslate_class is False

    def test_title_before_alias(self) -> None:
        rules = SeoRules.model_validate({"defaults": {"titleBefore": True}})

        assert rules.defaults.title_before is True

    def test_title_before_by_name(self) -> None:
        assert DefaultsRules(title_before=True).title_before is True

    def test_canonical_null_distinct_from_absent(self) -> None:
        explicit = SeoRules.model_validate({"defaults": {"canonical": None}})
        absent = SeoRules.model_validate({"defaults": {}})

        assert explicit.defaults.canonical is None
        assert absent.defaults.canonical is False

    def test_canonical_fixed_url(self) -> None:
        rules = SeoRules.model_validate({"defaults": {"canonical": "https://x"}})

        assert rules.defaults.canonical == "https://x"

    def test_canonical_true_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DefaultsRules(canonical=True)

    @pytest.mark.parametrize("value", [True, False, None, "index", "noindex"])
    def test_valid_robots_index(self, value: object) -> None:
        assert DefaultsRules(robots_index=value).robots_index == value

    @pytest.mark.parametrize("value", ["INDEX", "follow", "yes", "maybe"])
    def test_invalid_robots_index(self, value: str) -> None:
        with pytest.raises(ValidationError):
            DefaultsRules(robots_index=value)

    def test_invalid_robots_follow(self) -> None:
        with pytest.raises(ValidationError):
            DefaultsRules(robots_follow="noindex")


class TestLoadRules:
    """Tests for load_rules."""

    def test_loads_project_rules(self, project_rules_path) -> None:
        rules = load_rules(project_rules_path)

        assert rules.defaults.separator == " - "
        assert rules.defaults.canonical is False
        assert "google" in rules.webmaster_tags

    def test_loads_bare_yaml(self, write_rules) -> None:
        path = write_rules(
            "defaults:\n"
            "  title: Site\n"
            "  titleBefore: true\n"
            "  keywords: [a, b]\n"
            "  robots_index: false\n"
            "webmaster_tags:\n"
            "  google: abc\n"
            "add_notranslate_class: true\n"
        )

        rules = load_rules(path)

        assert rules.defaults.title == "Site"
        assert rules.defaults.title_before is True
        assert rules.defaults.keywords == ["a", "b"]
        assert rules.defaults.robots_index is False
        assert rules.webmaster_tags == {"google": "abc"}
        assert rules.add_notranslate_class is True

    def test_numeric_values_become_strings(self, write_rules) -> None:
        """Unquoted numeric tokens are accepted as strings."""
        path = write_rules(
            "defaults:\n"
            "  title: 2024\n"
            "  keywords: [seo, 42]\n"
            "webmaster_tags:\n"
            "  yandex: 1234567890\n"
        )

        rules = load_rules(path)

        assert rules.defaults.title == "2024"
        assert rules.defaults.keywords == ["seo", "42"]
        assert rules.webmaster_tags == {"yandex": "1234567890"}

    def test_empty_file_gives_defaults(self, write_rules) -> None:
        rules = load_rules(write_rules(""))

        assert rules == SeoRules()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("defaults: [unclosed\n"))

    def test_invalid_schema(self, write_rules) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules("defaults:\n  robots_follow: sometimes\n"))
