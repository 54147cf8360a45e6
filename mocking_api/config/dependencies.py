from functools import lru_cache

from mocking_api.config.logger import get_logger
from mocking_api.config.settings import get_settings
from mocking_api.users.generator import UserGenerator
from mocking_api.users.services import UserService
from mocking_api.users.store import UserStore


# ----------------------------
# UserService factory
# ----------------------------
@lru_cache
def get_user_service() -> UserService:
    settings = get_settings()
    return UserService(
        store=UserStore(),
        generator=UserGenerator(),
        generation=settings.user_generation,
        mock_data=settings.mock_data,
        logger=get_logger("UserService"),
    )
