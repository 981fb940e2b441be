import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from seometa.adapters.request_url import RequestUrlProvider
from seometa.components.meta_tags import SEOMeta
from seometa.rules.loader import load_rules
from seometa.rules.models import SeoRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("SEO_RULES_PATH", str(self.base_dir / "seo.yaml")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> SeoRules:
    return _load_cached_rules(settings.rules_path)


@lru_cache
def _load_cached_rules(path: Path) -> SeoRules:
    return load_rules(path)


# --- Builder ---
def get_seo_meta(request: Request, rules: SeoRules = Depends(get_rules)) -> SEOMeta:
    """Fresh builder per request, bound to the request URL for canonical fallback."""
    return SEOMeta(rules=rules, url_port=RequestUrlProvider(request))
