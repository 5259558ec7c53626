"""Pydantic schemas for the wizard's preset catalogues."""

from __future__ import annotations

from brand_weaver.models import ColorScheme, Typography
from brand_weaver.models.base import CamelModel
from brand_weaver.models.design import AestheticLevelInfo


class PresetsResponse(CamelModel):
    color_schemes: list[ColorScheme]
    typography_options: list[Typography]
    aesthetic_levels: list[AestheticLevelInfo]
