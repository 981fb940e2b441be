from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules_path() -> Path:
    """The seo.yaml shipped at the project root."""
    return PROJECT_ROOT / "seo.yaml"


@pytest.fixture
def write_rules(tmp_path):
    """Write a rules file into a temp dir and return its path."""

    def _write(content: str, name: str = "seo.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
