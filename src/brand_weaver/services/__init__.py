"""Services"""

from brand_weaver.services.deployment import dns_guidance, simulate_deployment
from brand_weaver.services.export import bundle_to_zip, full_export_zip, profile_to_json
from brand_weaver.services.linkedin import (
    ErrorCategory,
    ExtractionError,
    extract,
    resolve_username,
)
from brand_weaver.services.session_store import SessionStore, store

__all__ = [
    "ErrorCategory",
    "ExtractionError",
    "SessionStore",
    "bundle_to_zip",
    "dns_guidance",
    "extract",
    "full_export_zip",
    "profile_to_json",
    "resolve_username",
    "simulate_deployment",
    "store",
]
