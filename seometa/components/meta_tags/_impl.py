"""
SEOMeta - fluent builder for <head> metadata.

Accumulates title, description, keywords, robots directives, link
relations and custom tags for a single page render, then emits them as
one HTML fragment.

Key behaviors:
- Every mutator returns the instance so calls can be chained
- Accessors fall back to the configured defaults when nothing was set
- Title is tag-stripped, description is entity-escaped, at set time only
- Robots directives are normalized; anything unknown is rejected
- render() output order is fixed and independent of call order
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from seometa.rules.models import SeoRules

from .models import AlternateLanguage, AlternateMedia, CustomTag, InvalidRobotsValue
from .ports import CurrentUrlPort

logger = logging.getLogger(__name__)

# --- Webmaster Verification ---

WEBMASTER_TAGS: dict[str, str] = {
    "google": "google-site-verification",
    "bing": "msvalidate.01",
    "alexa": "alexaVerifyID",
    "pintrest": "p:domain_verify",
    "pinterest": "p:domain_verify",
    "yandex": "yandex-verification",
    "norton": "norton-safeweb-site-verification",
}


# --- Text Cleaning ---

_BARE_AMP_RE = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")


def _is_blank(value: Any) -> bool:
    """Empty for rendering purposes: falsy, or the string "0"."""
    return not value or (isinstance(value, str) and value == "0")


def strip_tags(text: Any) -> str:
    """
    Remove HTML tags and comments from text.

    A '>' inside a quoted attribute value does not close the tag, and an
    unclosed tag is dropped through to the end of the text. A '<' followed
    by whitespace is kept as text.
    """
    if text is None:
        return ""
    text = str(text)
    n = len(text)
    out: list[str] = []
    i = 0

    while i < n:
        ch = text[i]
        if ch != "<" or i + 1 >= n or text[i + 1].isspace():
            out.append(ch)
            i += 1
            continue

        if text.startswith("<!--", i):
            end = text.find("-->", i + 4)
            i = n if end == -1 else end + 3
            continue

        quote: str | None = None
        i += 1
        while i < n:
            c = text[i]
            if quote:
                if c == quote:
                    quote = None
            elif c in "\"'":
                quote = c
            elif c == ">":
                break
            i += 1
        i += 1

    return "".join(out)


def escape_html(text: Any) -> str:
    """
    Escape &, <, >, " and ' for use inside an attribute value.

    Existing entities are left alone, so escaping twice is harmless.
    """
    # Not html.escape: existing entities must not be double-encoded
    escaped = _BARE_AMP_RE.sub("&amp;", str(text))
    return (
        escaped.replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


# --- Robots Normalization ---

RobotsIndex = Literal["index", "noindex"]
RobotsFollow = Literal["follow", "nofollow"]


def _normalize_robots(value: Any, positive: str, negative: str, field: str) -> str | None:
    if value is None:
        return None
    if value is False or (isinstance(value, str) and value == negative):
        return negative
    if value is True or (isinstance(value, str) and value == positive):
        return positive
    raise InvalidRobotsValue(value, field)


def normalize_robots_index(index: Any) -> RobotsIndex | None:
    """Normalize an index directive to "index", "noindex" or None."""
    return _normalize_robots(index, "index", "noindex", "index")  # type: ignore[return-value]


def normalize_robots_follow(follow: Any) -> RobotsFollow | None:
    """Normalize a follow directive to "follow", "nofollow" or None."""
    return _normalize_robots(follow, "follow", "nofollow", "follow")  # type: ignore[return-value]


def _coerce_pair(item: Any, key: str) -> tuple[Any, Any]:
    if isinstance(item, Mapping):
        return item.get(key), item.get("url")
    if isinstance(item, (AlternateLanguage, AlternateMedia)):
        return getattr(item, key), item.url
    first, second = item
    return first, second


# --- Main Builder ---


class SEOMeta:
    """
    Per-request <head> metadata builder.

    One instance is meant to live for one page render. Not thread safe.
    """

    def __init__(
        self,
        rules: SeoRules | None = None,
        url_port: CurrentUrlPort | None = None,
    ) -> None:
        """
        Initialize builder.

        Args:
            rules: SEO configuration; library defaults when omitted
            url_port: Current request URL provider, used for canonical fallback
        """
        self._rules = rules if rules is not None else SeoRules()
        self._url_port = url_port

        self._title: str | None = None
        self._title_session: str | None = None
        self._title_default: str | None = None
        self._title_separator: str | None = None
        self._description: str | Literal[False] | None = None
        self._keywords: list[str] = []
        self._metatags: dict[str, tuple[str, Any]] = {}
        self._canonical: str | None = None
        self._amphtml: str | None = None
        self._prev: str | None = None
        self._next: str | None = None
        self._alternate_languages: list[AlternateLanguage] = []
        self._alternate_medias: list[AlternateMedia] = []
        self._robots_index: RobotsIndex | None = None
        self._robots_follow: RobotsFollow | None = None
        self._custom_tags: list[CustomTag] = []

        self._apply_robots_defaults()

    @property
    def rules(self) -> SeoRules:
        return self._rules

    # --- Title ---

    def set_title(self, title: str, append_default: bool = True) -> SEOMeta:
        """
        Set the page title.

        Strips meta-refresh fragments and HTML tags. When append_default is
        true and a default title exists, the default is joined on using the
        separator, before or after the title depending on configuration.
        """
        title = "" if title is None else str(title)
        # meta refresh injection
        title = title.replace("http-equiv=", "").replace("url=", "")
        title = strip_tags(title)

        self._title_session = title

        if append_default is True:
            self._title = self._parse_title(title)
        else:
            self._title = title

        return self

    def set_title_default(self, default: str | None) -> SEOMeta:
        self._title_default = default
        return self

    def set_title_separator(self, separator: str | None) -> SEOMeta:
        self._title_separator = separator
        return self

    def get_title(self) -> str | None:
        if _is_blank(self._title):
            return self.get_default_title()
        return self._title

    def get_default_title(self) -> str | None:
        if not self._title_default:
            return self._rules.defaults.title
        return self._title_default

    def get_title_session(self) -> str | None:
        return self._title_session or self.get_title()

    def get_title_separator(self) -> str:
        return self._title_separator or self._rules.defaults.separator

    def _parse_title(self, title: str) -> str:
        default = self.get_default_title()

        if not default:
            return title

        separator = self.get_title_separator()
        if self._rules.defaults.title_before:
            return f"{default}{separator}{title}"
        return f"{title}{separator}{default}"

    # --- Description ---

    def set_description(self, description: Any) -> SEOMeta:
        """
        Set the meta description.

        Falsy input or "0" stores False, which suppresses the description
        entirely (including the configured default). Anything else is escaped.
        """
        if _is_blank(description):
            self._description = False
        else:
            self._description = escape_html(description)
        return self

    def get_description(self) -> str | None:
        if self._description is False:
            return None
        return self._description or self._rules.defaults.description

    # --- Keywords ---

    def set_keywords(self, keywords: Any) -> SEOMeta:
        """Replace keywords. A string is split on ", "."""
        if keywords is None:
            keywords = []
        elif isinstance(keywords, str):
            keywords = keywords.split(", ")
        elif not isinstance(keywords, Iterable):
            keywords = [keywords]

        self._keywords = [strip_tags(keyword) for keyword in keywords]
        return self

    def add_keyword(self, keyword: Any) -> SEOMeta:
        """Append one keyword, or prepend a sequence of keywords."""
        if isinstance(keyword, str) or not isinstance(keyword, Iterable):
            self._keywords.append(strip_tags(keyword))
        else:
            self._keywords = [strip_tags(k) for k in keyword] + self._keywords
        return self

    def get_keywords(self) -> list[str]:
        return self._keywords or list(self._rules.defaults.keywords)

    # --- Custom Meta ---

    def add_meta(
        self,
        meta: str | Mapping[str, Any],
        value: Any = None,
        name: str = "name",
    ) -> SEOMeta:
        """
        Add one meta tag, or several from a mapping of key -> content.

        Each entry renders as <meta {name}="{key}" content="{value}">.
        """
        if isinstance(meta, Mapping):
            for key, content in meta.items():
                self._metatags[key] = (name, content)
        else:
            self._metatags[meta] = (name, value)
        return self

    def remove_meta(self, key: str) -> SEOMeta:
        self._metatags.pop(key, None)
        return self

    def get_metatags(self) -> dict[str, tuple[str, Any]]:
        return self._metatags

    # --- Links ---

    def set_canonical(self, url: str | None) -> SEOMeta:
        self._canonical = url
        return self

    def set_amp_html(self, url: str | None) -> SEOMeta:
        self._amphtml = url
        return self

    def set_prev(self, url: str | None) -> SEOMeta:
        self._prev = url
        return self

    def set_next(self, url: str | None) -> SEOMeta:
        self._next = url
        return self

    def get_canonical(self) -> str | None:
        """
        Get the canonical URL.

        Without an explicit value, defaults.canonical decides: None uses the
        current request URL, False disables the link, a string is used as is.
        """
        if self._canonical:
            return self._canonical

        configured = self._rules.defaults.canonical
        if configured is None:
            if self._url_port is None:
                logger.debug("Canonical falls back to current URL but no URL port is bound")
                return None
            return self._url_port.full_url()
        if configured is False:
            return None
        return configured  # type: ignore[return-value]

    def get_amp_html(self) -> str | None:
        return self._amphtml

    def get_prev(self) -> str | None:
        return self._prev

    def get_next(self) -> str | None:
        return self._next

    def add_alternate_language(self, lang: str, url: str) -> SEOMeta:
        self._alternate_languages.append(AlternateLanguage(lang=lang, url=url))
        return self

    def add_alternate_languages(self, languages: Iterable[Any]) -> SEOMeta:
        """
        Append several alternate languages.

        Items may be AlternateLanguage, {"lang": ..., "url": ...} or (lang, url).
        """
        for item in languages:
            lang, url = _coerce_pair(item, "lang")
            self._alternate_languages.append(AlternateLanguage(lang=lang, url=url))
        return self

    def get_alternate_languages(self) -> list[AlternateLanguage]:
        return self._alternate_languages

    def add_alternate_media(self, media: str, url: str) -> SEOMeta:
        self._alternate_medias.append(AlternateMedia(media=media, url=url))
        return self

    def add_alternate_medias(self, medias: Iterable[Any]) -> SEOMeta:
        """Append several alternate medias; same item shapes as languages."""
        for item in medias:
            media, url = _coerce_pair(item, "media")
            self._alternate_medias.append(AlternateMedia(media=media, url=url))
        return self

    def get_alternate_medias(self) -> list[AlternateMedia]:
        return self._alternate_medias

    # --- Robots ---

    def set_robots(self, index: Any, follow: Any = None) -> SEOMeta:
        """
        Set both robots directives.

        Raises:
            InvalidRobotsValue: either value is not None, a bool or its literal
        """
        # Normalize both before storing so a bad follow leaves state untouched
        normalized_index = normalize_robots_index(index)
        normalized_follow = normalize_robots_follow(follow)
        self._robots_index = normalized_index
        self._robots_follow = normalized_follow
        return self

    def set_robots_index(self, index: Any) -> SEOMeta:
        self._robots_index = normalize_robots_index(index)
        return self

    def set_robots_follow(self, follow: Any) -> SEOMeta:
        self._robots_follow = normalize_robots_follow(follow)
        return self

    def get_robots_index(self) -> RobotsIndex | None:
        return self._robots_index

    def get_robots_follow(self) -> RobotsFollow | None:
        return self._robots_follow

    def get_robots(self) -> str:
        return ", ".join(d for d in (self._robots_index, self._robots_follow) if d)

    def _apply_robots_defaults(self) -> None:
        defaults = self._rules.defaults
        self._robots_index = normalize_robots_index(defaults.robots_index)
        self._robots_follow = normalize_robots_follow(defaults.robots_follow)

    # --- Custom Tags ---

    def add_custom_tag(self, tag: str | None, attributes: Mapping[str, Any] | None = None) -> SEOMeta:
        """
        Append a custom void tag, e.g. add_custom_tag("meta", {"name": "viewport"}).

        A falsy tag clears every custom tag instead. That form is kept for
        compatibility only; use clear_custom_tags().
        """
        if not tag:
            logger.debug("add_custom_tag called without a tag name, clearing custom tags")
            return self.clear_custom_tags()

        self._custom_tags.append(CustomTag(tag=tag, attributes=dict(attributes or {})))
        return self

    def clear_custom_tags(self) -> SEOMeta:
        self._custom_tags = []
        return self

    def get_custom_tags(self) -> list[CustomTag]:
        return self._custom_tags

    # --- Rendering ---

    def _load_webmaster_tags(self) -> None:
        for provider, token in self._rules.webmaster_tags.items():
            if token:
                meta = WEBMASTER_TAGS.get(provider, provider)
                logger.debug("Adding webmaster verification tag %s", meta)
                self.add_meta(meta, token)

    def render(self, minify: bool = False) -> str:
        """
        Render all metadata as an HTML fragment.

        Args:
            minify: Concatenate tags without newlines

        Returns:
            HTML for inclusion inside <head>
        """
        self._load_webmaster_tags()

        title = self.get_title()
        description = self.get_description()
        keywords = self.get_keywords()
        canonical = self.get_canonical()
        robots = self.get_robots()

        html: list[str] = []

        if not _is_blank(title):
            if self._rules.add_notranslate_class:
                html.append(f'<title class="notranslate">{title}</title>')
            else:
                html.append(f"<title>{title}</title>")

        if description:
            html.append(f'<meta name="description" content="{description}">')

        if keywords:
            html.append(f'<meta name="keywords" content="{", ".join(keywords)}">')

        for key, (name, content) in self._metatags.items():
            if _is_blank(content):
                continue
            html.append(f'<meta {name}="{key}" content="{content}">')

        if canonical:
            html.append(f'<link rel="canonical" href="{canonical}"/>')

        if self._amphtml:
            html.append(f'<link rel="amphtml" href="{self._amphtml}"/>')

        if self._prev:
            html.append(f'<link rel="prev" href="{self._prev}"/>')

        if self._next:
            html.append(f'<link rel="next" href="{self._next}"/>')

        for language in self._alternate_languages:
            html.append(
                f'<link rel="alternate" hreflang="{language.lang}" href="{language.url}"/>'
            )

        if robots:
            html.append(f'<meta name="robots" content="{robots}">')

        for media in self._alternate_medias:
            html.append(f'<link rel="alternate" media="{media.media}" href="{media.url}"/>')

        for custom in self._custom_tags:
            parts = [f"<{custom.tag}"]
            parts.extend(f'{k}="{v}"' for k, v in custom.attributes.items())
            parts.append(">")
            html.append(" ".join(parts))

        return "".join(html) if minify else os.linesep.join(html)

    # Historical name of render()
    generate = render

    def reset(self) -> None:
        """
        Clear per-request state.

        Title, default title, separator and custom tags are kept. Robots
        directives go back to the configured defaults.
        """
        self._description = None
        self._title_session = None
        self._next = None
        self._prev = None
        self._canonical = None
        self._amphtml = None
        self._metatags = {}
        self._keywords = []
        self._alternate_languages = []
        self._alternate_medias = []
        self._apply_robots_defaults()


# --- Factory ---


def create_seo_meta(
    rules: SeoRules | None = None,
    url_port: CurrentUrlPort | None = None,
) -> SEOMeta:
    """Create an SEOMeta builder."""
    return SEOMeta(rules=rules, url_port=url_port)
