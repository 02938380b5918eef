from __future__ import annotations

from dataclasses import replace

import pytest

from hosteldada.services.auth_service import (
    MAX_ACTIVE_SESSIONS,
    AdminTokenNotConfiguredError,
    AuthService,
    InvalidAdminTokenError,
)
from hosteldada.utils.config import get_settings


def _build_auth_service(admin_token: str | None = "warden") -> AuthService:
    return AuthService(settings=replace(get_settings(), admin_token=admin_token))


def test_login_issues_session_accepted_until_logout() -> None:
    service = _build_auth_service()
    session = service.login("warden")

    service.validate_bearer_token(session)
    service.logout(session)

    with pytest.raises(InvalidAdminTokenError):
        service.validate_bearer_token(session)


def test_oldest_session_dropped_once_cap_reached() -> None:
    service = _build_auth_service()
    sessions = [service.login("warden") for _ in range(MAX_ACTIVE_SESSIONS + 1)]

    with pytest.raises(InvalidAdminTokenError):
        service.validate_bearer_token(sessions[0])
    for session in sessions[1:]:
        service.validate_bearer_token(session)


def test_login_without_configured_token_raises() -> None:
    service = _build_auth_service(admin_token=None)

    assert not service.auth_enabled
    with pytest.raises(AdminTokenNotConfiguredError):
        service.login("warden")
