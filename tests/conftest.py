from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from brand_weaver.api.dependencies import get_app_settings, get_store
from brand_weaver.api.main import app
from brand_weaver.config import Settings, get_settings
from brand_weaver.constants import sample_profile
from brand_weaver.models import ProfileData
from brand_weaver.services.session_store import SessionStore


@pytest.fixture
def full_profile() -> ProfileData:
    """Profile with every section populated."""
    return sample_profile("jane-doe")


@pytest.fixture
def jane_profile() -> ProfileData:
    """Minimal profile: a name and one current position."""
    return ProfileData.model_validate(
        {
            "profile": {"username": "janedoe", "fullName": "Jane Doe"},
            "experience": [
                {
                    "title": "Senior Engineer",
                    "company": "Acme Corp",
                    "startDate": "2021-03",
                    "isCurrent": True,
                }
            ],
        }
    )


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings from the real defaults with overrides, ignoring the environment."""

    def _make(**overrides: object) -> Settings:
        base = replace(
            get_settings(),
            rapidapi_key=None,
            rapidapi_host="fresh-linkedin-profile-data.p.rapidapi.com",
            sample_fallback=True,
            max_retries=3,
            backoff_base=0.5,
            backoff_max=8.0,
            http_timeout=15.0,
            site_url="https://example.com",
        )
        return replace(base, **overrides)

    return _make


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def client(
    store: SessionStore, make_settings: Callable[..., Settings]
) -> Iterator[TestClient]:
    """Test client with an isolated session store and sample-data extraction."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_app_settings] = lambda: make_settings()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
