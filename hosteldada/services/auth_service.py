"""Admin token login and bearer session validation for mutating routes."""

from __future__ import annotations

import secrets
from typing import Optional

from hosteldada.utils.config import Settings, get_settings
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

MAX_ACTIVE_SESSIONS = 16


class AuthenticationError(Exception):
    """Base authentication failure."""


class AdminTokenNotConfiguredError(AuthenticationError):
    """Raised when HOSTEL_ADMIN_TOKEN is missing."""


class InvalidAdminTokenError(AuthenticationError):
    """Raised when a login token or bearer session is rejected."""


class AuthService:
    """Hands out wardens' session tokens; every check passes when no admin token is set."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        # Insertion ordered; the oldest session is dropped once the cap is hit.
        self._sessions: dict[str, None] = {}

    @property
    def auth_enabled(self) -> bool:
        return bool(self._settings.admin_token)

    def login(self, provided_admin_token: str) -> str:
        if not self._settings.admin_token:
            raise AdminTokenNotConfiguredError(
                "HOSTEL_ADMIN_TOKEN is not configured; admin login is unavailable"
            )
        if not secrets.compare_digest(provided_admin_token, self._settings.admin_token):
            logger.warning("Admin login rejected")
            raise InvalidAdminTokenError("Invalid admin token")
        session_token = secrets.token_urlsafe(32)
        if len(self._sessions) >= MAX_ACTIVE_SESSIONS:
            self._sessions.pop(next(iter(self._sessions)))
        self._sessions[session_token] = None
        logger.info("Admin login accepted | active_sessions=%s", len(self._sessions))
        return session_token

    def logout(self, bearer_token: str) -> None:
        self._sessions.pop(bearer_token, None)

    def validate_bearer_token(self, bearer_token: str) -> None:
        if not self.auth_enabled:
            return
        if not self._sessions:
            raise InvalidAdminTokenError("No active session. Login first.")
        if not any(secrets.compare_digest(bearer_token, token) for token in self._sessions):
            raise InvalidAdminTokenError("Invalid bearer token")
