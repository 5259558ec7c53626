"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Body of ``detail`` for extraction failures."""

    error: str = Field(description="What went wrong")
    category: str = Field(description="One of the extraction error categories")
    hint: str = Field(description="Sentence to show the user")
