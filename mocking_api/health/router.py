from fastapi import APIRouter, Depends

from mocking_api.config.dependencies import get_user_service
from mocking_api.config.settings import Settings, get_settings
from mocking_api.users.services import UserService

health_router = APIRouter(prefix="/health", tags=["health"])


@health_router.get("", summary="Liveness check")
async def health_check(
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    return {
        "status": "healthy",
        "application": settings.app.app_name,
        "users": service.count_users(),
    }
