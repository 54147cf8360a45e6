import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from mocking_api.config.dependencies import get_user_service
from mocking_api.config.settings import Settings, get_settings
from mocking_api.health.router import health_router
from mocking_api.shared.errors import register_exception_handlers
from mocking_api.shared.logger import StructuredLogger
from mocking_api.users.routes import router as users_router
from mocking_api.users.services import UserService


def create_app(settings: Optional[Settings] = None, service: Optional[UserService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    :param settings: overrides the process-wide settings
    :param service: overrides the process-wide UserService (one store per app)
    """
    settings = settings or get_settings()
    logger = StructuredLogger(
        name="http",
        log_file=settings.app.log_file,
        level=settings.app.log_level,
    )

    app = FastAPI(title=settings.app.app_name, debug=settings.app.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    register_exception_handlers(app)

    app.dependency_overrides[get_settings] = lambda: settings
    if service is not None:
        app.dependency_overrides[get_user_service] = lambda: service

    app.include_router(health_router)
    app.include_router(users_router, prefix=settings.app.api_prefix)

    logger.info("Application configured", app_name=settings.app.app_name, api_prefix=settings.app.api_prefix)
    return app
