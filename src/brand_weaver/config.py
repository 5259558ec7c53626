"""Runtime configuration read from environment variables.

Values are loaded from a ``.env`` file (if present) via python-dotenv and
can be overridden by the process environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

__all__ = ["DEFAULT_SITE_URL", "Settings", "configure_logging", "get_settings"]

DEFAULT_SITE_URL = "https://example.com"
DEFAULT_RAPIDAPI_HOST = "fresh-linkedin-profile-data.p.rapidapi.com"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric %s=%r", name, raw)
        return default


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment-driven settings."""

    rapidapi_key: str | None
    rapidapi_host: str
    sample_fallback: bool
    max_retries: int
    backoff_base: float
    backoff_max: float
    http_timeout: float
    site_url: str
    log_level: str


def get_settings() -> Settings:
    """Read settings from the current environment.

    Called per use rather than cached so tests can ``monkeypatch.setenv``.
    """
    return Settings(
        rapidapi_key=os.getenv("RAPIDAPI_KEY") or None,
        rapidapi_host=os.getenv("RAPIDAPI_HOST", DEFAULT_RAPIDAPI_HOST),
        sample_fallback=_env_bool("BRAND_WEAVER_SAMPLE_FALLBACK", True),
        max_retries=max(0, int(_env_number("BRAND_WEAVER_MAX_RETRIES", 3))),
        backoff_base=_env_number("BRAND_WEAVER_BACKOFF_BASE", 0.5),
        backoff_max=_env_number("BRAND_WEAVER_BACKOFF_MAX", 8.0),
        http_timeout=_env_number("BRAND_WEAVER_HTTP_TIMEOUT", 15.0),
        site_url=os.getenv("BRAND_WEAVER_SITE_URL", DEFAULT_SITE_URL).rstrip("/"),
        log_level=os.getenv("BRAND_WEAVER_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and the development server."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
