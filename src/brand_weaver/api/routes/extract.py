"""Profile extraction routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from brand_weaver.api.dependencies import get_app_settings, get_store
from brand_weaver.api.schemas.common import ErrorDetail
from brand_weaver.api.schemas.extract import ExtractRequest
from brand_weaver.config import Settings
from brand_weaver.models import ProfileData
from brand_weaver.services.linkedin import ErrorCategory, ExtractionError, extract
from brand_weaver.services.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extract"])

STATUS_BY_CATEGORY = {
    ErrorCategory.CONFIGURATION_MISSING: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCategory.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCategory.UPSTREAM_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorCategory.NETWORK_FAILURE: status.HTTP_504_GATEWAY_TIMEOUT,
}


def to_http_exception(exc: ExtractionError) -> HTTPException:
    detail = ErrorDetail(error=str(exc), category=exc.category.value, hint=exc.hint)
    return HTTPException(status_code=STATUS_BY_CATEGORY[exc.category], detail=detail.model_dump())


@router.post(
    "/extract",
    response_model=ProfileData,
    summary="Extract a LinkedIn profile",
    description="Resolve a username or profile URL and return the normalized profile.",
    responses={
        400: {"model": ErrorDetail, "description": "Invalid username or URL"},
        429: {"model": ErrorDetail, "description": "Upstream rate limit"},
        502: {"model": ErrorDetail, "description": "Upstream failure"},
        504: {"model": ErrorDetail, "description": "Upstream unreachable"},
    },
)
def extract_profile(
    request: ExtractRequest,
    store: Annotated[SessionStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ProfileData:
    try:
        data = extract(request.identifier, settings=settings)
    except ExtractionError as exc:
        logger.warning("Extraction failed (%s): %s", exc.category.value, exc)
        raise to_http_exception(exc) from exc

    session_id = store.create_session()
    store.save_profile_data(session_id, data)
    return data
