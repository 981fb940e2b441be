"""
Meta tags component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Errors ---


class InvalidRobotsValue(ValueError):
    """Raised when a robots directive cannot be normalized."""

    def __init__(self, value: Any, field: str) -> None:
        self.value = value
        self.field = field
        super().__init__(f"Invalid robots {field} value: {value!r}")


@dataclass(frozen=True)
class MetaValidationError:
    """Meta tags validation error."""

    code: str
    message: str
    field: str | None = None


# --- Link / Tag Models ---


@dataclass(frozen=True)
class AlternateLanguage:
    """Alternate language link (hreflang)."""

    lang: str
    url: str


@dataclass(frozen=True)
class AlternateMedia:
    """Alternate media link."""

    media: str
    url: str


@dataclass(frozen=True)
class CustomTag:
    """Arbitrary void element rendered as an open tag."""

    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)


# --- Input Models ---


@dataclass(frozen=True)
class RenderHeadInput:
    """Declarative description of a page's head metadata."""

    title: str | None = None
    append_default_title: bool = True
    description: str | None = None
    keywords: tuple[str, ...] = ()
    canonical: str | None = None
    amphtml: str | None = None
    prev: str | None = None
    next: str | None = None
    robots_index: bool | str | None = None
    robots_follow: bool | str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
    alternate_languages: tuple[AlternateLanguage, ...] = ()
    alternate_medias: tuple[AlternateMedia, ...] = ()
    custom_tags: tuple[CustomTag, ...] = ()
    minify: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class RenderHeadOutput:
    """Output containing the rendered head fragment."""

    html: str | None
    errors: list[MetaValidationError] = field(default_factory=list)
    success: bool = True
