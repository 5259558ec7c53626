"""In-memory session storage.

One session holds the extracted profile, the design config and the
generated bundle of a single wizard run.  Nothing survives a restart.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from brand_weaver.models import DesignConfig, GeneratedBundle, ProfileData

logger = logging.getLogger(__name__)

__all__ = ["Session", "SessionStore", "store"]


@dataclass
class Session:
    profile_data: ProfileData | None = None
    design_config: DesignConfig | None = None
    bundle: GeneratedBundle | None = None


class SessionStore:
    """Last-write-wins mapping of session id to :class:`Session`.

    ``get_latest_*`` reads the session that was most recently created or
    written to.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._latest: str | None = None

    def create_session(self) -> str:
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = Session()
        self._latest = session_id
        logger.info("Created session %s", session_id)
        return session_id

    def _session(self, session_id: str) -> Session:
        # Writing to an unknown id creates it.
        session = self._sessions.setdefault(session_id, Session())
        self._latest = session_id
        return session

    def save_profile_data(self, session_id: str, data: ProfileData) -> None:
        self._session(session_id).profile_data = data

    def save_design_config(self, session_id: str, config: DesignConfig) -> None:
        self._session(session_id).design_config = config

    def save_bundle(self, session_id: str, bundle: GeneratedBundle) -> None:
        self._session(session_id).bundle = dict(bundle)

    def get_profile_data(self, session_id: str) -> ProfileData | None:
        session = self._sessions.get(session_id)
        return session.profile_data if session else None

    def get_design_config(self, session_id: str) -> DesignConfig | None:
        session = self._sessions.get(session_id)
        return session.design_config if session else None

    def get_bundle(self, session_id: str) -> GeneratedBundle | None:
        session = self._sessions.get(session_id)
        return session.bundle if session else None

    @property
    def latest_session_id(self) -> str | None:
        return self._latest

    def get_latest_profile_data(self) -> ProfileData | None:
        return self.get_profile_data(self._latest) if self._latest else None

    def get_latest_design_config(self) -> DesignConfig | None:
        return self.get_design_config(self._latest) if self._latest else None

    def get_latest_bundle(self) -> GeneratedBundle | None:
        return self.get_bundle(self._latest) if self._latest else None

    def clear(self) -> None:
        self._sessions.clear()
        self._latest = None


# Process-wide instance served to the API through a dependency.
store = SessionStore()
