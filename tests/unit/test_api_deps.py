"""
Tests for the FastAPI integration and request URL adapters.
"""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from seometa.adapters.request_url import RequestUrlProvider, StaticUrlProvider
from seometa.api import deps
from seometa.api.deps import get_rules, get_seo_meta, get_settings
from seometa.components.meta_tags import SEOMeta
from seometa.rules.models import DefaultsRules, SeoRules

# --- Test Setup ---


@pytest.fixture
def app() -> FastAPI:
    """Test app with one page using the request-scoped builder."""
    app = FastAPI()

    @app.get("/page", response_class=PlainTextResponse)
    def page(meta: SEOMeta = Depends(get_seo_meta)) -> str:
        meta.set_title("Page")
        return meta.render(minify=True)

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


@pytest.fixture
def clear_caches():
    get_settings.cache_clear()
    deps._load_cached_rules.cache_clear()
    yield
    get_settings.cache_clear()
    deps._load_cached_rules.cache_clear()


# --- Adapter Tests ---


class TestUrlProviders:
    """Tests for current URL adapters."""

    def test_static_provider(self) -> None:
        assert StaticUrlProvider("https://x/a").full_url() == "https://x/a"
        assert StaticUrlProvider(None).full_url() is None

    def test_request_provider(self) -> None:
        request = Request(
            {
                "type": "http",
                "method": "GET",
                "scheme": "https",
                "server": ("example.com", 443),
                "path": "/a",
                "query_string": b"b=1",
                "headers": [(b"host", b"example.com")],
            }
        )

        assert RequestUrlProvider(request).full_url() == "https://example.com/a?b=1"


# --- Dependency Tests ---


class TestGetSeoMeta:
    """Tests for the request-scoped builder dependency."""

    def test_canonical_from_request_url(self, app: FastAPI, client: TestClient) -> None:
        rules = SeoRules(defaults=DefaultsRules(title="Site", canonical=None))
        app.dependency_overrides[get_rules] = lambda: rules

        response = client.get("/page?x=1")

        assert response.status_code == 200
        assert response.text == (
            "<title>Page - Site</title>"
            '<link rel="canonical" href="http://testserver/page?x=1"/>'
        )

    def test_fresh_builder_per_request(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_rules] = lambda: SeoRules()

        first = client.get("/page")
        second = client.get("/page")

        assert first.text == second.text == "<title>Page</title>"

    def test_rules_from_env_path(
        self, client: TestClient, write_rules, monkeypatch, clear_caches
    ) -> None:
        path = write_rules("defaults:\n  title: FromFile\n  separator: ' | '\n")
        monkeypatch.setenv("SEO_RULES_PATH", str(path))
        get_settings.cache_clear()

        response = client.get("/page")

        assert response.text == "<title>Page | FromFile</title>"


class TestSettings:
    """Tests for settings resolution."""

    def test_default_rules_path(self, monkeypatch, clear_caches) -> None:
        monkeypatch.delenv("SEO_RULES_PATH", raising=False)

        settings = get_settings()

        assert settings.rules_path == settings.base_dir / "seo.yaml"

    def test_env_rules_path(self, tmp_path, monkeypatch, clear_caches) -> None:
        monkeypatch.setenv("SEO_RULES_PATH", str(tmp_path / "custom.yaml"))

        assert get_settings().rules_path == tmp_path / "custom.yaml"
