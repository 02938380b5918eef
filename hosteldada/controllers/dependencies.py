"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hosteldada.services.auth_service import (
    AdminTokenNotConfiguredError,
    AuthService,
    InvalidAdminTokenError,
)
from hosteldada.services.hostel_service import HostelWorkflowService
from hosteldada.utils.config import get_settings
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    service = getattr(request.app.state, "auth_service", None)
    if service is None:
        service = AuthService(settings=get_settings())
        request.app.state.auth_service = service
    return service


def get_hostel_service(request: Request) -> HostelWorkflowService:
    service = getattr(request.app.state, "hostel_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Hostel service is not initialized",
        )
    return service


async def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    """Guard mutating hostel routes; a no-op while no admin token is set."""
    if not auth_service.auth_enabled:
        return
    token = credentials.credentials if credentials is not None else ""
    try:
        auth_service.validate_bearer_token(token)
    except (AdminTokenNotConfiguredError, InvalidAdminTokenError) as exc:
        logger.warning(
            "Admin route rejected | method=%s | path=%s | has_token=%s",
            request.method,
            request.url.path,
            bool(token),
        )
        detail = str(exc) if token else "Authorization header with Bearer token is required"
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
