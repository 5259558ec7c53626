"""Static website generator.

``generate`` turns a :class:`~brand_weaver.models.ProfileData` and a
:class:`~brand_weaver.models.DesignConfig` into a bundle of text files.
It performs no I/O and raises nothing for well-formed input.
"""

from brand_weaver.generator.site import (
    BUNDLE_FILES,
    DEFAULT_BASE_URL,
    create_preview_html,
    generate,
)

__all__ = ["BUNDLE_FILES", "DEFAULT_BASE_URL", "create_preview_html", "generate"]
