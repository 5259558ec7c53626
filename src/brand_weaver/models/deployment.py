"""Deployment request/response contracts.

Deployment is simulated: these types describe where a site *would* live
and which DNS records a custom domain would need.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from brand_weaver.models.base import CamelModel

__all__ = [
    "DeploymentOptions",
    "DeploymentResult",
    "DnsGuidance",
    "DnsRecord",
    "Platform",
]


class Platform(StrEnum):
    GITHUB_PAGES = "github_pages"
    NETLIFY = "netlify"
    VERCEL = "vercel"


class DeploymentOptions(CamelModel):
    platform: Platform = Platform.NETLIFY
    repository_name: str = ""
    site_name: str = ""
    custom_domain: str = ""


class DnsRecord(CamelModel):
    type: str
    name: str
    value: str
    ttl: str = "3600"


class DnsGuidance(CamelModel):
    platform: str
    records: list[DnsRecord] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)


class DeploymentResult(CamelModel):
    success: bool
    url: str = ""
    platform: Platform | None = None
    dns_records: DnsGuidance | None = None
    message: str = ""
    error: str = ""
