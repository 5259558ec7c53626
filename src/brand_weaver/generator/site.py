"""Top-level site generation: one profile and one design config in, a bundle out."""

from __future__ import annotations

import datetime as dt
import logging

from markupsafe import Markup

from brand_weaver.config import DEFAULT_SITE_URL
from brand_weaver.constants import sample_config, sample_profile
from brand_weaver.generator.context import SiteContext, build_context
from brand_weaver.generator.environment import env
from brand_weaver.generator.sections import render_sections
from brand_weaver.generator.seo import person_json_ld, render_robots, render_sitemap
from brand_weaver.models import DesignConfig, GeneratedBundle, ProfileData

logger = logging.getLogger(__name__)

__all__ = ["BUNDLE_FILES", "DEFAULT_BASE_URL", "create_preview_html", "generate"]

DEFAULT_BASE_URL = DEFAULT_SITE_URL
BUNDLE_FILES = ("index.html", "styles.css", "sitemap.xml", "robots.txt")


def render_stylesheet(ctx: SiteContext) -> str:
    return env.get_template("styles.css").render(ctx=ctx)


def render_index(ctx: SiteContext, stylesheet: str) -> str:
    return env.get_template("index.html").render(
        ctx=ctx,
        t=ctx.t,
        sections=render_sections(ctx),
        stylesheet=Markup(stylesheet),
        json_ld=person_json_ld(ctx),
    )


def generate(
    profile: ProfileData,
    config: DesignConfig,
    *,
    year: int | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> GeneratedBundle:
    """Render the static website for *profile* styled by *config*.

    Args:
        profile: Normalized profile data.
        config: Design choices from the wizard.
        year: Copyright year printed in the footer. Defaults to the current
            year; pass it explicitly for reproducible output.
        base_url: Public root URL used for the canonical link, the sitemap
            and robots.txt.

    Returns:
        Mapping of file name to file content for ``index.html``,
        ``styles.css``, ``sitemap.xml`` and ``robots.txt``.
    """
    if year is None:
        year = dt.date.today().year
    ctx = build_context(profile, config, year=year, base_url=base_url)
    stylesheet = render_stylesheet(ctx)
    bundle: GeneratedBundle = {
        "index.html": render_index(ctx, stylesheet),
        "styles.css": stylesheet,
        "sitemap.xml": render_sitemap(ctx.base_url),
        "robots.txt": render_robots(ctx.base_url),
    }
    logger.debug(
        "Generated site for %r: %s",
        ctx.display_name,
        ", ".join(f"{name}={len(content)}" for name, content in bundle.items()),
    )
    return bundle


def create_preview_html(
    profile: ProfileData | None = None,
    config: DesignConfig | None = None,
    *,
    year: int | None = None,
) -> str:
    """Return ``index.html`` for a preview.

    Falls back to the built-in sample profile and sample config when either
    is missing, so the preview pane always has something to show.
    """
    if profile is None or config is None:
        profile, config = sample_profile(), sample_config()
    return generate(profile, config, year=year)["index.html"]
