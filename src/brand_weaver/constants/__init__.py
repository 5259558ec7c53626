from __future__ import annotations

from brand_weaver.constants.sample_profile import (
    SAMPLE_USERNAME,
    format_username,
    sample_config,
    sample_profile,
)

__all__ = [
    "SAMPLE_USERNAME",
    "format_username",
    "sample_config",
    "sample_profile",
]
