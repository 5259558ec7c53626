"""Structured data, sitemap and robots.txt."""

from __future__ import annotations

from typing import Any

from brand_weaver.generator.context import SiteContext
from brand_weaver.generator.environment import env, safe_url

__all__ = ["SITEMAP_SLUGS", "person_json_ld", "render_robots", "render_sitemap"]

SITEMAP_SLUGS = (
    "",
    "about",
    "experience",
    "education",
    "certifications",
    "recommendations",
    "posts",
    "contact",
)


def person_json_ld(ctx: SiteContext) -> dict[str, Any]:
    """Build the schema.org ``Person`` object for the page.

    Keys whose value would be empty are left out.
    """
    person: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Person",
        "name": ctx.display_name,
        "url": f"{ctx.base_url}/",
    }
    if ctx.job_title:
        person["jobTitle"] = ctx.job_title
    if ctx.headline:
        person["description"] = ctx.headline
    image = safe_url(ctx.profile_picture)
    if image:
        person["image"] = image
    linkedin = safe_url(ctx.linkedin_url)
    if linkedin:
        person["sameAs"] = [linkedin]

    experience = ctx.data.experience
    if experience and experience[0].company:
        person["worksFor"] = {"@type": "Organization", "name": experience[0].company}

    schools = [edu.school for edu in ctx.data.education if edu.school]
    if schools:
        person["alumniOf"] = [
            {"@type": "EducationalOrganization", "name": school} for school in schools
        ]
    return person


def render_sitemap(base_url: str) -> str:
    return env.get_template("sitemap.xml").render(
        base_url=base_url.rstrip("/"), slugs=SITEMAP_SLUGS
    )


def render_robots(base_url: str) -> str:
    return env.get_template("robots.txt").render(base_url=base_url.rstrip("/"))
