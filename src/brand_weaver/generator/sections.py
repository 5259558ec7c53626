"""Page sections, one function each.

Every section takes the resolved :class:`SiteContext` and returns its
markup, or ``None`` when the data behind it is empty.  ``SECTIONS`` lists
them in page order.
"""

from __future__ import annotations

from collections.abc import Callable

from markupsafe import Markup

from brand_weaver.generator.context import SiteContext
from brand_weaver.generator.environment import env

__all__ = ["SECTIONS", "Section", "render_sections"]

Section = Callable[[SiteContext], Markup | None]


def _render(name: str, ctx: SiteContext) -> Markup:
    template = env.get_template(f"sections/{name}.html")
    return Markup(template.render(ctx=ctx, t=ctx.t).strip())


def hero(ctx: SiteContext) -> Markup:
    return _render("hero", ctx)


def about(ctx: SiteContext) -> Markup | None:
    return _render("about", ctx) if ctx.summary else None


def experience(ctx: SiteContext) -> Markup | None:
    return _render("experience", ctx) if ctx.data.experience else None


def education(ctx: SiteContext) -> Markup | None:
    return _render("education", ctx) if ctx.data.education else None


def skills(ctx: SiteContext) -> Markup | None:
    return _render("skills", ctx) if ctx.named_skills else None


def certifications(ctx: SiteContext) -> Markup | None:
    return _render("certifications", ctx) if ctx.data.certifications else None


def featured_posts(ctx: SiteContext) -> Markup | None:
    return _render("posts", ctx) if ctx.data.featured_posts else None


def recommendations(ctx: SiteContext) -> Markup | None:
    return _render("recommendations", ctx) if ctx.data.recommendations else None


def portfolio(ctx: SiteContext) -> Markup | None:
    return _render("portfolio", ctx) if ctx.portfolio_projects else None


def footer(ctx: SiteContext) -> Markup:
    return _render("footer", ctx)


def floating_contacts(ctx: SiteContext) -> Markup | None:
    return _render("contacts", ctx) if ctx.has_contacts else None


def cookie_banner(ctx: SiteContext) -> Markup | None:
    return _render("consent", ctx) if ctx.show_consent_banner else None


SECTIONS: tuple[Section, ...] = (
    hero,
    about,
    experience,
    education,
    skills,
    certifications,
    featured_posts,
    recommendations,
    portfolio,
    footer,
    floating_contacts,
    cookie_banner,
)


def render_sections(ctx: SiteContext) -> list[Markup]:
    """Render every non-empty section in page order."""
    rendered = (section(ctx) for section in SECTIONS)
    return [markup for markup in rendered if markup is not None]
