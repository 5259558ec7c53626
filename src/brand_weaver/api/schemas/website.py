"""Pydantic schemas for site generation."""

from __future__ import annotations

from brand_weaver.models import DesignConfig, ProfileData
from brand_weaver.models.base import CamelModel


class GenerateRequest(CamelModel):
    data: ProfileData
    config: DesignConfig


class GenerateResponse(CamelModel):
    preview_url: str
    session_id: str
