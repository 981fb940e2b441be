"""
Meta tags component - declarative <head> rendering.

Builds an SEOMeta from a frozen page description and renders it in one
call, reporting invalid robots directives as validation errors instead of
raising.

Invariants:
- I1: Output order is fixed (title, description, keywords, meta, links, robots, media, custom)
- I2: Robots directives are normalized or rejected, never passed through
- I3: Only title and description are cleaned; other values render verbatim
"""

from __future__ import annotations

from seometa.rules.models import SeoRules

from ._impl import SEOMeta
from .models import InvalidRobotsValue, MetaValidationError, RenderHeadInput, RenderHeadOutput
from .ports import CurrentUrlPort


def build_seo_meta(
    inp: RenderHeadInput,
    *,
    rules: SeoRules | None = None,
    url_port: CurrentUrlPort | None = None,
) -> SEOMeta:
    """
    Apply a page description to a fresh builder.

    Raises:
        InvalidRobotsValue: robots_index or robots_follow cannot be normalized
    """
    meta = SEOMeta(rules=rules, url_port=url_port)

    if inp.title is not None:
        meta.set_title(inp.title, append_default=inp.append_default_title)
    if inp.description is not None:
        meta.set_description(inp.description)
    if inp.keywords:
        meta.set_keywords(list(inp.keywords))
    if inp.meta:
        meta.add_meta(inp.meta)

    meta.set_canonical(inp.canonical)
    meta.set_amp_html(inp.amphtml)
    meta.set_prev(inp.prev)
    meta.set_next(inp.next)

    meta.add_alternate_languages(inp.alternate_languages)
    meta.add_alternate_medias(inp.alternate_medias)

    # Leave configured robots defaults alone unless the page overrides them
    if inp.robots_index is not None:
        meta.set_robots_index(inp.robots_index)
    if inp.robots_follow is not None:
        meta.set_robots_follow(inp.robots_follow)

    for custom in inp.custom_tags:
        meta.add_custom_tag(custom.tag, custom.attributes)

    return meta


# --- Component Entry Points ---


def run_render(
    inp: RenderHeadInput,
    *,
    rules: SeoRules | None = None,
    url_port: CurrentUrlPort | None = None,
) -> RenderHeadOutput:
    """
    Render the <head> fragment for a page.

    Args:
        inp: Page metadata.
        rules: Optional SEO configuration.
        url_port: Optional current URL provider for the canonical fallback.

    Returns:
        RenderHeadOutput with the HTML, or errors if a robots value is invalid.
    """
    try:
        meta = build_seo_meta(inp, rules=rules, url_port=url_port)
    except InvalidRobotsValue as e:
        return RenderHeadOutput(
            html=None,
            errors=[
                MetaValidationError(
                    code="invalid_robots",
                    message=str(e),
                    field=f"robots_{e.field}",
                )
            ],
            success=False,
        )

    return RenderHeadOutput(
        html=meta.render(minify=inp.minify),
        errors=[],
        success=True,
    )


def run(
    inp: RenderHeadInput,
    *,
    rules: SeoRules | None = None,
    url_port: CurrentUrlPort | None = None,
) -> RenderHeadOutput:
    """Main entry point for the meta tags component."""
    if isinstance(inp, RenderHeadInput):
        return run_render(inp, rules=rules, url_port=url_port)
    raise ValueError(f"Unknown input type: {type(inp)}")
