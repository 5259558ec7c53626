"""Download routes for the API.

Every endpoint takes an optional ``session`` and otherwise serves the most
recent session.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from brand_weaver.api.dependencies import get_store
from brand_weaver.models import GeneratedBundle, ProfileData
from brand_weaver.services.export import bundle_to_zip, full_export_zip, profile_to_json
from brand_weaver.services.session_store import SessionStore

router = APIRouter(prefix="/download", tags=["downloads"])

SessionQuery = Annotated[str | None, Query(description="Session id; defaults to the latest")]


def _attachment(content: bytes | str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _bundle_or_404(store: SessionStore, session: str | None) -> GeneratedBundle:
    bundle = store.get_bundle(session) if session else store.get_latest_bundle()
    if bundle is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No generated website found. Generate one first.",
        )
    return bundle


def _profile_or_404(store: SessionStore, session: str | None) -> ProfileData:
    profile = store.get_profile_data(session) if session else store.get_latest_profile_data()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No profile data found. Extract a profile first.",
        )
    return profile


@router.get(
    "/source",
    summary="Download website source",
    responses={
        200: {"content": {"application/zip": {}}},
        404: {"description": "Nothing generated"},
    },
)
def download_source(
    store: Annotated[SessionStore, Depends(get_store)], session: SessionQuery = None
) -> Response:
    bundle = _bundle_or_404(store, session)
    return _attachment(bundle_to_zip(bundle), "application/zip", "website-source.zip")


@router.get(
    "/data",
    summary="Download profile data as JSON",
    responses={404: {"description": "No profile extracted"}},
)
def download_data(
    store: Annotated[SessionStore, Depends(get_store)], session: SessionQuery = None
) -> Response:
    profile = _profile_or_404(store, session)
    return _attachment(profile_to_json(profile), "application/json", "profile-data.json")


@router.get(
    "/zip",
    summary="Download profile data and website",
    responses={200: {"content": {"application/zip": {}}}, 404: {"description": "No profile"}},
)
def download_zip(
    store: Annotated[SessionStore, Depends(get_store)], session: SessionQuery = None
) -> Response:
    profile = _profile_or_404(store, session)
    bundle = store.get_bundle(session) if session else store.get_latest_bundle()
    return _attachment(
        full_export_zip(profile, bundle), "application/zip", "linkedin-profile-data.zip"
    )
