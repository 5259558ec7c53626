"""Shared dependencies for API routes."""

from __future__ import annotations

from brand_weaver.config import Settings, get_settings
from brand_weaver.services.session_store import SessionStore, store


def get_store() -> SessionStore:
    """Return the process-wide session store.

    Tests override this dependency to get an isolated store.
    """
    return store


def get_app_settings() -> Settings:
    """Read settings from the environment for each request."""
    return get_settings()
