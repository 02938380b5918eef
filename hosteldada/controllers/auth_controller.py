"""Controller layer for admin login and logout."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from hosteldada.controllers.dependencies import bearer_scheme, get_auth_service
from hosteldada.services.auth_service import (
    AdminTokenNotConfiguredError,
    AuthService,
    InvalidAdminTokenError,
)


router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    admin_token: str = Field(min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    try:
        return LoginResponse(access_token=auth_service.login(payload.admin_token))
    except AdminTokenNotConfiguredError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc
    except InvalidAdminTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    if credentials is not None:
        auth_service.logout(credentials.credentials)
