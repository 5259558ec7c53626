"""Route handlers for the API."""

from brand_weaver.api.routes import deploy, downloads, extract, health, presets, website

__all__ = [
    "deploy",
    "downloads",
    "extract",
    "health",
    "presets",
    "website",
]
