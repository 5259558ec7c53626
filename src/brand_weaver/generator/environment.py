"""Jinja environment shared by every render of the site generator."""

from __future__ import annotations

from urllib.parse import urlsplit

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from brand_weaver.generator import context

__all__ = ["env", "safe_url"]

_ALLOWED_SCHEMES = {"http", "https", "mailto", "tel"}


def safe_url(value: str | None) -> str:
    """Return *value* if it is a web, mail or phone link; otherwise ``""``.

    Relative references are kept. ``javascript:`` and ``data:`` URLs are
    dropped so profile data cannot inject script through ``href``/``src``.
    """
    value = (value or "").strip()
    if not value:
        return ""
    try:
        scheme = urlsplit(value).scheme.lower()
    except ValueError:
        return ""
    if scheme and scheme not in _ALLOWED_SCHEMES:
        return ""
    return value


def _build_environment() -> Environment:
    environment = Environment(
        loader=PackageLoader("brand_weaver.generator", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    environment.filters["safe_url"] = safe_url
    environment.filters["initials"] = context.derive_initials
    environment.globals.update(
        AOS_CSS=context.AOS_CSS,
        AOS_JS=context.AOS_JS,
        SWIPER_CSS=context.SWIPER_CSS,
        SWIPER_JS=context.SWIPER_JS,
        GSAP_JS=context.GSAP_JS,
    )
    return environment


# Read-only after construction; renders share it freely.
env = _build_environment()
