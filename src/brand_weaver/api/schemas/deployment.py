"""Pydantic schemas for deployment endpoints."""

from __future__ import annotations

from brand_weaver.models import DnsGuidance
from brand_weaver.models.base import CamelModel


class DnsGuidanceResponse(CamelModel):
    dns_records: DnsGuidance
