"""
Meta tags component - fluent <head> metadata builder.
"""

from ._impl import (
    WEBMASTER_TAGS,
    SEOMeta,
    create_seo_meta,
    escape_html,
    normalize_robots_follow,
    normalize_robots_index,
    strip_tags,
)
from .component import build_seo_meta, run, run_render
from .models import (
    AlternateLanguage,
    AlternateMedia,
    CustomTag,
    InvalidRobotsValue,
    MetaValidationError,
    RenderHeadInput,
    RenderHeadOutput,
)
from .ports import CurrentUrlPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "build_seo_meta",
    # Builder
    "SEOMeta",
    "create_seo_meta",
    "WEBMASTER_TAGS",
    # Helpers
    "escape_html",
    "strip_tags",
    "normalize_robots_index",
    "normalize_robots_follow",
    # Models
    "AlternateLanguage",
    "AlternateMedia",
    "CustomTag",
    "RenderHeadInput",
    "RenderHeadOutput",
    "MetaValidationError",
    "InvalidRobotsValue",
    # Ports
    "CurrentUrlPort",
]
