"""Preset catalogue routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from brand_weaver.api.schemas.presets import PresetsResponse
from brand_weaver.models import AESTHETIC_LEVELS, COLOR_SCHEMES, TYPOGRAPHY_OPTIONS

router = APIRouter(tags=["presets"])


@router.get("/presets", response_model=PresetsResponse, summary="Wizard presets")
def get_presets() -> PresetsResponse:
    """Return the colour schemes, typography pairs and aesthetic levels."""
    return PresetsResponse(
        color_schemes=list(COLOR_SCHEMES),
        typography_options=list(TYPOGRAPHY_OPTIONS),
        aesthetic_levels=list(AESTHETIC_LEVELS),
    )
