"""Simulated deployment routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from brand_weaver.api.schemas.deployment import DnsGuidanceResponse
from brand_weaver.models import DeploymentOptions, DeploymentResult, Platform
from brand_weaver.services.deployment import DEFAULT_SITE_NAME, dns_guidance, simulate_deployment

router = APIRouter(tags=["deploy"])


@router.post(
    "/deploy",
    response_model=DeploymentResult,
    summary="Deploy a website",
    description="Simulate a deployment and return the URL the site would be served from.",
)
def deploy_website(options: DeploymentOptions) -> DeploymentResult:
    return simulate_deployment(options)


@router.get(
    "/dns-guidance",
    response_model=DnsGuidanceResponse,
    summary="DNS records for a custom domain",
)
def get_dns_guidance(
    platform: Annotated[Platform, Query(description="Target hosting platform")],
    domain: Annotated[str, Query(min_length=1, description="Custom domain")],
    site_name: Annotated[str, Query(alias="siteName")] = DEFAULT_SITE_NAME,
) -> DnsGuidanceResponse:
    return DnsGuidanceResponse(dns_records=dns_guidance(platform, domain, site_name))
