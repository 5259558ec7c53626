"""Simulated deployment.

Nothing is uploaded.  The functions here compute the URL a site would get
on each host and the DNS records a custom domain would need there.
"""

from __future__ import annotations

import logging

from brand_weaver.models import (
    DeploymentOptions,
    DeploymentResult,
    DnsGuidance,
    DnsRecord,
    Platform,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SITE_NAME",
    "deployment_url",
    "dns_guidance",
    "is_apex_domain",
    "simulate_deployment",
]

DEFAULT_SITE_NAME = "my-site"

GITHUB_PAGES_IPS = (
    "185.199.108.153",
    "185.199.109.153",
    "185.199.110.153",
    "185.199.111.153",
)
VERCEL_IP = "76.76.21.21"
VERCEL_CNAME = "cname.vercel-dns.com"
NETLIFY_IP = "75.2.60.5"

_PLATFORM_NAMES = {
    Platform.GITHUB_PAGES: "GitHub Pages",
    Platform.VERCEL: "Vercel",
    Platform.NETLIFY: "Netlify",
}

_INSTRUCTIONS = {
    Platform.GITHUB_PAGES: [
        "Add the DNS records to your domain provider",
        "Wait for DNS propagation (can take up to 48 hours)",
        "Enable HTTPS in your GitHub repository settings",
    ],
    Platform.VERCEL: [
        "Add the DNS records to your domain provider",
        "Add the domain in your Vercel project settings",
        "Vercel will automatically provision SSL certificate",
    ],
    Platform.NETLIFY: [
        "Add the DNS records to your domain provider",
        "Add the domain in your Netlify site settings",
        "Netlify will automatically provision SSL certificate",
    ],
}


def is_apex_domain(domain: str) -> bool:
    """``example.com`` is an apex domain, ``www.example.com`` is not."""
    return len(domain.strip(".").split(".")) == 2


def _normalize_domain(domain: str) -> str:
    domain = domain.strip().lower()
    for prefix in ("https://", "http://"):
        domain = domain.removeprefix(prefix)
    return domain.split("/", 1)[0].strip(".")


def dns_guidance(platform: Platform | str, domain: str, site_name: str = "") -> DnsGuidance:
    """Return the records *domain* needs to point at *platform*.

    Apex domains get A records plus a ``www`` CNAME; sub-domains get one
    CNAME named after their first label.
    """
    platform = Platform(platform)
    domain = _normalize_domain(domain)
    site_name = site_name or DEFAULT_SITE_NAME

    if platform is Platform.GITHUB_PAGES:
        addresses: tuple[str, ...] = GITHUB_PAGES_IPS
        target = f"{site_name}.github.io"
    elif platform is Platform.VERCEL:
        addresses = (VERCEL_IP,)
        target = VERCEL_CNAME
    else:
        addresses = (NETLIFY_IP,)
        target = f"{site_name}.netlify.app"

    if is_apex_domain(domain):
        records = [DnsRecord(type="A", name="@", value=ip) for ip in addresses]
        records.append(DnsRecord(type="CNAME", name="www", value=target))
    else:
        records = [DnsRecord(type="CNAME", name=domain.split(".")[0], value=target)]

    return DnsGuidance(
        platform=_PLATFORM_NAMES[platform],
        records=records,
        instructions=_INSTRUCTIONS[platform],
    )


def deployment_url(options: DeploymentOptions) -> str:
    """URL the site would be served from."""
    if options.custom_domain.strip():
        return f"https://{_normalize_domain(options.custom_domain)}"
    if options.platform is Platform.GITHUB_PAGES:
        return f"https://{options.repository_name or 'user'}.github.io"
    site = options.site_name or DEFAULT_SITE_NAME
    if options.platform is Platform.VERCEL:
        return f"https://{site}.vercel.app"
    return f"https://{site}.netlify.app"


def simulate_deployment(options: DeploymentOptions) -> DeploymentResult:
    """Pretend to deploy and report where the site would be."""
    url = deployment_url(options)
    guidance = None
    if options.custom_domain.strip():
        site_name = options.site_name or options.repository_name or DEFAULT_SITE_NAME
        guidance = dns_guidance(options.platform, options.custom_domain, site_name)
    logger.info("Simulated %s deployment to %s", options.platform.value, url)
    return DeploymentResult(
        success=True,
        url=url,
        platform=options.platform,
        dns_records=guidance,
        message="Website deployed successfully",
    )
