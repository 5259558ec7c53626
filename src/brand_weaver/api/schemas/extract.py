"""Pydantic schemas for profile extraction."""

from __future__ import annotations

from pydantic import Field, model_validator

from brand_weaver.models.base import CamelModel


class ExtractRequest(CamelModel):
    """Either a username or a full profile URL."""

    username: str = ""
    linkedin_url: str = Field("", alias="linkedinUrl")

    @model_validator(mode="after")
    def _require_identifier(self) -> ExtractRequest:
        if not (self.username.strip() or self.linkedin_url.strip()):
            raise ValueError("LinkedIn username or profile URL is required")
        return self

    @property
    def identifier(self) -> str:
        return self.linkedin_url.strip() or self.username.strip()
