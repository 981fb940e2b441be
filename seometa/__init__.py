"""
seometa - fluent builder for HTML <head> SEO metadata.
"""

from seometa.components.meta_tags import (
    AlternateLanguage,
    AlternateMedia,
    CustomTag,
    InvalidRobotsValue,
    SEOMeta,
    create_seo_meta,
)
from seometa.rules.models import DefaultsRules, SeoRules

__all__ = [
    "SEOMeta",
    "create_seo_meta",
    "InvalidRobotsValue",
    "AlternateLanguage",
    "AlternateMedia",
    "CustomTag",
    "SeoRules",
    "DefaultsRules",
]
