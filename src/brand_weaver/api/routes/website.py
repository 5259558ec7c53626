"""Site generation and preview routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from brand_weaver.api.dependencies import get_app_settings, get_store
from brand_weaver.api.schemas.website import GenerateRequest, GenerateResponse
from brand_weaver.config import Settings
from brand_weaver.generator import create_preview_html, generate
from brand_weaver.services.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["website"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate a website",
    description="Render the site for a profile and design config and store it in a new session.",
)
def generate_website(
    request: GenerateRequest,
    store: Annotated[SessionStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GenerateResponse:
    session_id = store.create_session()
    store.save_profile_data(session_id, request.data)
    store.save_design_config(session_id, request.config)

    try:
        bundle = generate(request.data, request.config, base_url=settings.site_url)
    except Exception as exc:
        logger.exception("Website generation failed for session %s", session_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate website.",
        ) from exc

    store.save_bundle(session_id, bundle)
    logger.info(
        "Generated %d files for session %s (%s)",
        len(bundle),
        session_id,
        request.data.profile.full_name or request.data.profile.username,
    )
    return GenerateResponse(preview_url=f"/api/preview?session={session_id}", session_id=session_id)


@router.get(
    "/preview",
    response_class=HTMLResponse,
    summary="Preview a generated website",
    description="Return the generated index.html, or a sample site if the session has none.",
)
def preview_website(
    store: Annotated[SessionStore, Depends(get_store)],
    session: Annotated[str | None, Query(description="Session id from /generate")] = None,
) -> HTMLResponse:
    bundle = store.get_bundle(session) if session else None
    if bundle and "index.html" in bundle:
        return HTMLResponse(bundle["index.html"])
    logger.info("No generated site for session %s; serving sample preview", session)
    return HTMLResponse(create_preview_html())
