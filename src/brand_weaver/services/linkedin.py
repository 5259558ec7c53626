"""LinkedIn profile extraction.

Resolves a profile URL or username, fetches the profile from a RapidAPI
LinkedIn scraper and maps the payload onto :class:`ProfileData`.

Two upstream shapes are understood: the snake_case payload of
``fresh-linkedin-profile-data`` and the camelCase payload of
``linkedin-api8``, either of which may be wrapped in a ``data`` key.
"""

from __future__ import annotations

import datetime as dt
import logging
import random
import re
import time
from collections.abc import Mapping
from enum import StrEnum
from typing import Any
from urllib.parse import unquote

import requests

from brand_weaver.config import Settings, get_settings
from brand_weaver.constants import sample_profile
from brand_weaver.models import ProfileData
from brand_weaver.utils.fallback import first_present, first_text, get_path

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "ExtractionError",
    "extract",
    "fetch_profile",
    "map_profile",
    "resolve_username",
]


class ErrorCategory(StrEnum):
    CONFIGURATION_MISSING = "configuration_missing"
    INVALID_INPUT = "invalid_input"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_FAILURE = "upstream_failure"
    NETWORK_FAILURE = "network_failure"


DEFAULT_HINTS: dict[ErrorCategory, str] = {
    ErrorCategory.CONFIGURATION_MISSING: (
        "Set RAPIDAPI_KEY (and RAPIDAPI_HOST if you use a different provider) in .env."
    ),
    ErrorCategory.INVALID_INPUT: (
        "Enter a profile URL like https://www.linkedin.com/in/jane-doe or just the username."
    ),
    ErrorCategory.RATE_LIMITED: "The profile API is rate limiting requests. Try again in a minute.",
    ErrorCategory.UPSTREAM_FAILURE: (
        "The profile API returned an unexpected response. Try again later."
    ),
    ErrorCategory.NETWORK_FAILURE: "Could not reach the profile API. Check your connection.",
}


class ExtractionError(RuntimeError):
    """Raised when a profile cannot be extracted.

    ``category`` is one of a small closed set the UI switches on; ``hint``
    is a sentence meant to be shown to the user as-is.
    """

    def __init__(self, message: str, category: ErrorCategory, hint: str | None = None) -> None:
        super().__init__(message)
        self.category = category
        self.hint = hint or DEFAULT_HINTS[category]


# linkedin.com/in/<username>, optionally with scheme, www., m. or a country subdomain.
_PROFILE_URL = re.compile(
    r"^(?:https?://)?(?:[a-z]{1,3}\.|www\.)?linkedin\.com/in/([^/?#\s]+)/?(?:[/?#].*)?$",
    re.IGNORECASE,
)
_USERNAME = re.compile(r"^[\w-]{3,100}$")

_RETRY_STATUSES = {429, 500, 502, 503, 504}


def resolve_username(identifier: str) -> str:
    """Return the LinkedIn username contained in *identifier*.

    Args:
        identifier: A profile URL or a bare username.

    Raises:
        ExtractionError: With ``INVALID_INPUT`` if no username can be found.
    """
    value = (identifier or "").strip()
    match = _PROFILE_URL.match(value)
    if match:
        value = unquote(match.group(1))
    elif "linkedin.com" in value.lower() or "/" in value:
        raise ExtractionError(
            f"Not a LinkedIn profile URL: {identifier!r}", ErrorCategory.INVALID_INPUT
        )
    value = value.lstrip("@")
    if not _USERNAME.match(value):
        raise ExtractionError(
            f"Not a valid LinkedIn username: {identifier!r}", ErrorCategory.INVALID_INPUT
        )
    return value


def _endpoint(host: str, username: str) -> tuple[str, dict[str, str]]:
    if "linkedin-api8" in host:
        return f"https://{host}/", {"username": username}
    profile_url = f"https://www.linkedin.com/in/{username}/"
    return f"https://{host}/get-linkedin-profile", {
        "linkedin_url": profile_url,
        "include_skills": "true",
        "include_certifications": "true",
        "include_recommendations": "true",
    }


def _retry_delay(response: requests.Response, attempt: int, settings: Settings) -> float:
    """Seconds to wait before retry number *attempt* + 1.

    A numeric ``Retry-After`` header wins; otherwise exponential backoff with
    full jitter.  Both are capped at ``backoff_max``.
    """
    retry_after = response.headers.get("Retry-After", "")
    if retry_after.strip().isdigit():
        return min(float(retry_after), settings.backoff_max)
    ceiling = min(settings.backoff_max, settings.backoff_base * 2**attempt)
    return random.uniform(0, ceiling)


def _send(
    client: requests.Session, url: str, params: dict[str, str], settings: Settings
) -> requests.Response:
    headers = {
        "x-rapidapi-key": settings.rapidapi_key or "",
        "x-rapidapi-host": settings.rapidapi_host,
    }
    try:
        return client.get(url, params=params, headers=headers, timeout=settings.http_timeout)
    except (requests.ConnectionError, requests.Timeout) as exc:
        raise ExtractionError(
            f"Could not reach {settings.rapidapi_host}: {exc}", ErrorCategory.NETWORK_FAILURE
        ) from exc
    except requests.RequestException as exc:
        raise ExtractionError(
            f"Profile request failed: {exc}", ErrorCategory.UPSTREAM_FAILURE
        ) from exc


def _parse(response: requests.Response, username: str, attempts: int) -> Mapping[str, Any]:
    status = response.status_code
    if status in (401, 403):
        raise ExtractionError(
            f"Profile API rejected the API key (HTTP {status})",
            ErrorCategory.CONFIGURATION_MISSING,
            "Check that RAPIDAPI_KEY is valid and subscribed to the profile API.",
        )
    if status == 404:
        raise ExtractionError(
            f"Profile not found: {username}",
            ErrorCategory.INVALID_INPUT,
            "No public LinkedIn profile exists for that username.",
        )
    if status == 429:
        raise ExtractionError(
            f"Profile API rate limit exceeded after {attempts} attempts",
            ErrorCategory.RATE_LIMITED,
        )
    if status >= 400:
        raise ExtractionError(f"Profile API returned HTTP {status}", ErrorCategory.UPSTREAM_FAILURE)

    try:
        payload = response.json()
    except ValueError as exc:
        raise ExtractionError(
            "Profile API returned invalid JSON", ErrorCategory.UPSTREAM_FAILURE
        ) from exc
    if not isinstance(payload, Mapping):
        raise ExtractionError(
            "Profile API returned an unexpected payload", ErrorCategory.UPSTREAM_FAILURE
        )
    return payload


def fetch_profile(
    client: requests.Session, username: str, settings: Settings
) -> Mapping[str, Any]:
    """Fetch the raw upstream payload for *username*.

    Retries on 429 and 5xx up to ``settings.max_retries`` times.

    Raises:
        ExtractionError: Categorized by HTTP status or transport failure.
    """
    url, params = _endpoint(settings.rapidapi_host, username)
    attempts = settings.max_retries + 1

    for attempt in range(attempts):
        response = _send(client, url, params, settings)
        if response.status_code not in _RETRY_STATUSES or attempt == attempts - 1:
            break
        delay = _retry_delay(response, attempt, settings)
        logger.warning(
            "Profile API returned HTTP %s for %s; retry %d/%d in %.2fs",
            response.status_code,
            username,
            attempt + 1,
            settings.max_retries,
            delay,
        )
        time.sleep(delay)

    return _parse(response, username, attempts)


def format_date(value: Any) -> str:
    """Normalize an upstream date to ``YYYY-MM`` / ``YYYY`` text.

    Accepts strings (returned stripped) and ``{"year": .., "month": ..}``
    mappings.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, Mapping):
        year = value.get("year")
        if not year:
            return ""
        month = value.get("month")
        if isinstance(month, int) or (isinstance(month, str) and month.isdigit()):
            return f"{year}-{int(month):02d}"
        return str(year)
    return ""


def _count(source: Any, keys: list[str]) -> int:
    """First integer-like value under *keys*, else 0."""
    value = first_present(source, keys, 0)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return 0


def _text(source: Any, path: str) -> str | None:
    value = get_path(source, path)
    return value if isinstance(value, str) else None


def _items(payload: Any, keys: list[str]) -> list[Any]:
    found = first_present(payload, keys, default=[])
    return found if isinstance(found, list) else []


def _map_experience(item: Mapping[str, Any], index: int) -> dict[str, Any]:
    end_date = format_date(first_present(item, ["ends_at", "end", "end_date", "endDate"]))
    is_current = first_present(item, ["is_current", "isCurrent"])
    return {
        "id": f"exp-{index}",
        "title": first_text(item, ["title", "position"]),
        "company": first_text(item, ["company", "companyName", "company_name"]),
        "companyLogo": first_text(item, ["company_logo_url", "logo_url", "companyLogo", "logo"]),
        "location": first_text(item, ["location"]),
        "startDate": format_date(
            first_present(item, ["starts_at", "start", "start_date", "startDate"])
        ),
        "endDate": end_date,
        "isCurrent": bool(is_current) if is_current is not None else not end_date,
        "description": first_text(item, ["description"]),
    }


def _map_education(item: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {
        "id": f"edu-{index}",
        "school": first_text(item, ["school", "schoolName", "school_name"]),
        "degree": first_text(item, ["degree_name", "degree"]),
        "fieldOfStudy": first_text(item, ["field_of_study", "fieldOfStudy"]),
        "schoolLogo": first_text(item, ["logo_url", "school_logo_url", "logo"]),
        "startDate": format_date(first_present(item, ["starts_at", "start", "start_date"])),
        "endDate": format_date(first_present(item, ["ends_at", "end", "end_date"])),
        "description": first_text(item, ["description"]),
    }


def _map_certification(item: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {
        "id": f"cert-{index}",
        "name": first_text(item, ["name", "title"]),
        "issuer": first_text(item, ["authority", "issuer", "company.name"]),
        "issuerLogo": first_text(item, ["logo_url", "company.logo", "issuer_logo"]),
        "issueDate": format_date(
            first_present(item, ["starts_at", "start", "issued_at", "issueDate"])
        ),
        "expirationDate": format_date(first_present(item, ["ends_at", "end", "expires_at"])),
        "credentialId": first_text(item, ["license_number", "credential_id", "credentialId"]),
        "credentialUrl": first_text(item, ["url", "credential_url", "credentialUrl"]),
    }


def _map_skill(item: Any) -> dict[str, Any] | None:
    if isinstance(item, str):
        return {"name": item.strip()} if item.strip() else None
    name = first_text(item, ["name", "skill"])
    if not name:
        return None
    return {"name": name, "endorsements": _count(item, ["endorsements", "endorsementsCount"])}


def _map_language(item: Any) -> dict[str, Any] | None:
    if isinstance(item, str):
        return {"name": item.strip()} if item.strip() else None
    name = first_text(item, ["name", "language"])
    return {"name": name, "proficiency": first_text(item, ["proficiency"])} if name else None


def _map_post(item: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {
        "id": f"post-{index}",
        "postUrl": first_text(item, ["url", "link", "article_link", "postUrl"]),
        "contentPreview": first_text(
            item, ["title", "description", "text", "content"], default="Featured content"
        ),
        "date": format_date(first_present(item, ["published_on", "date", "postedDate"])),
        "imageUrl": first_text(item, ["image_url", "cover_image", "thumbnail", "image"]),
        "embedCode": first_text(item, ["embed_code", "embedCode"]),
        "engagement": {
            "likes": _count(item, ["likes", "num_likes", "likeCount"]),
            "comments": _count(item, ["comments", "num_comments", "commentsCount"]),
            "shares": _count(item, ["shares", "num_shares", "repostsCount"]),
        },
    }


def _map_recommendation(item: Any, index: int) -> dict[str, Any] | None:
    if isinstance(item, str):
        if not item.strip():
            return None
        return {"id": f"rec-{index}", "recommenderName": "Anonymous", "text": item.strip()}
    return {
        "id": f"rec-{index}",
        "recommenderName": first_text(
            item, ["name", "recommender_name", "recommender.name"], default="Anonymous"
        ),
        "recommenderHeadline": first_text(item, ["headline", "recommender.headline"]),
        "recommenderProfilePicture": first_text(
            item, ["profile_pic_url", "profile_image_url", "recommender.picture"]
        ),
        "recommenderLinkedInUrl": first_text(
            item, ["linkedin_url", "profile_url", "recommender.url"]
        ),
        "text": first_text(item, ["text", "recommendation", "description"]),
        "relationship": first_text(item, ["relationship"]),
        "date": format_date(first_present(item, ["date", "created_at"])),
    }


def _full_name(payload: Any) -> str:
    first = first_text(payload, ["first_name", "firstName"])
    last = first_text(payload, ["last_name", "lastName"])
    return f"{first} {last}".strip()


def _city_country(payload: Any) -> str:
    parts = (_text(payload, "city"), _text(payload, "country"))
    return ", ".join(part.strip() for part in parts if part and part.strip())


def _background_image(payload: Any) -> Any:
    # linkedin-api8 sends a list of sized variants.
    images = get_path(payload, "backgroundImage")
    if isinstance(images, list) and images:
        return get_path(images[0], "url")
    return images if isinstance(images, str) else None


def map_profile(
    payload: Mapping[str, Any], *, username: str, extracted_at: str = ""
) -> ProfileData:
    """Map an upstream payload onto :class:`ProfileData`.

    Every field is looked up through an ordered fallback chain; anything the
    payload lacks ends up as the model default.
    """
    wrapped = payload.get("data")
    data = wrapped if isinstance(wrapped, Mapping) else payload
    handle = first_text(data, ["public_identifier", "publicIdentifier", "username"], username)

    profile = {
        "username": handle,
        "firstName": first_text(data, ["first_name", "firstName"]),
        "lastName": first_text(data, ["last_name", "lastName"]),
        "fullName": first_text(data, ["full_name", "fullName", _full_name]),
        "headline": first_text(data, ["headline", "job_title"]),
        "summary": first_text(data, ["about", "summary"]),
        "location": first_text(
            data, [lambda d: _text(d, "location"), "geo.full", _city_country]
        ),
        "profilePicture": first_text(
            data, ["profile_image_url", "profile_pic_url", "profilePicture"]
        ),
        "headerImage": first_text(
            data,
            ["background_image_url", "background_cover_image_url", _background_image],
        ),
        "email": first_text(data, ["email"]),
        "phone": first_text(data, ["phone"]),
        "linkedinUrl": first_text(
            data,
            ["linkedin_url", "profileURL", lambda d: f"https://www.linkedin.com/in/{handle}"],
        ),
        "connections": _count(data, ["connection_count", "connections", "connectionsCount"]),
    }

    skills = (_map_skill(item) for item in _items(data, ["skills"]))
    languages = (_map_language(item) for item in _items(data, ["languages"]))
    recommendations = (
        _map_recommendation(item, i)
        for i, item in enumerate(
            _items(data, ["recommendations", "recommendations_received", "recommendationsReceived"])
        )
    )
    posts = _items(data, ["articles", "posts", "featured", "activities", "publications"])
    return ProfileData.model_validate(
        {
            "profile": profile,
            "experience": [
                _map_experience(item, i)
                for i, item in enumerate(_items(data, ["experiences", "position", "positions"]))
                if isinstance(item, Mapping)
            ],
            "education": [
                _map_education(item, i)
                for i, item in enumerate(_items(data, ["educations", "education"]))
                if isinstance(item, Mapping)
            ],
            "certifications": [
                _map_certification(item, i)
                for i, item in enumerate(_items(data, ["certifications", "certificates"]))
                if isinstance(item, Mapping)
            ],
            "skills": [skill for skill in skills if skill],
            "languages": [language for language in languages if language],
            "featuredPosts": [
                _map_post(item, i) for i, item in enumerate(posts) if isinstance(item, Mapping)
            ],
            "recommendations": [rec for rec in recommendations if rec],
            "extractedAt": extracted_at,
        }
    )


def _now() -> str:
    return dt.datetime.now(dt.UTC).isoformat(timespec="seconds")


def extract(
    identifier: str,
    *,
    client: requests.Session | None = None,
    settings: Settings | None = None,
) -> ProfileData:
    """Extract and normalize the profile behind *identifier*.

    Without an API key the built-in sample profile is returned, unless
    ``BRAND_WEAVER_SAMPLE_FALLBACK`` is turned off.

    Raises:
        ExtractionError: On invalid input, missing configuration, or any
            upstream failure.
    """
    settings = settings or get_settings()
    username = resolve_username(identifier)

    if not settings.rapidapi_key:
        if not settings.sample_fallback:
            raise ExtractionError(
                "RAPIDAPI_KEY is not configured", ErrorCategory.CONFIGURATION_MISSING
            )
        logger.warning("RAPIDAPI_KEY not set; serving sample data for %s", username)
        return sample_profile(username, extracted_at=_now())

    if client is not None:
        payload = fetch_profile(client, username, settings)
    else:
        with requests.Session() as session:
            payload = fetch_profile(session, username, settings)

    profile = map_profile(payload, username=username, extracted_at=_now())
    logger.info(
        "Extracted %s: %d experience, %d education, %d skills",
        username,
        len(profile.experience),
        len(profile.education),
        len(profile.skills),
    )
    return profile
