"""
app.py: FastAPI application factory.

This is the ASGI application object imported by uvicorn. It builds one
hostel session and registers the routers.

Usage:
    uvicorn app:app --reload
"""

from __future__ import annotations

from fastapi import FastAPI

from hosteldada.controllers.auth_controller import router as auth_router
from hosteldada.controllers.hostel_controller import router as hostel_router
from hosteldada.repository.seed_repository import SeedRepository
from hosteldada.services.auth_service import AuthService
from hosteldada.services.hostel_service import HostelWorkflowService
from hosteldada.utils.config import Settings, get_settings
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Services are attached to app.state; controllers resolve them through
    hosteldada.controllers.dependencies.
    """
    settings = settings or get_settings()

    repository = SeedRepository()
    hostel_service = HostelWorkflowService(repository=repository, settings=settings)
    auth_service = AuthService(settings=settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
    )

    app.include_router(auth_router)
    app.include_router(hostel_router)

    app.state.hostel_service = hostel_service
    app.state.auth_service = auth_service

    logger.info(
        "Application ready | name=%s | version=%s | auth_enabled=%s",
        settings.app_name,
        settings.app_version,
        auth_service.auth_enabled,
    )
    return app


# Module-level app object for uvicorn
app = create_app()
