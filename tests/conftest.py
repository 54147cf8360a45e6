import random

import pytest

from mocking_api.config.settings import MockDataSettings, UserGenerationSettings
from mocking_api.shared.logger import StructuredLogger
from mocking_api.users.generator import UserGenerator
from mocking_api.users.services import UserService
from mocking_api.users.store import UserStore


@pytest.fixture
def logger():
    return StructuredLogger(name="tests", log_file="", level="WARNING")


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def service(store, logger):
    return UserService(
        store=store,
        generator=UserGenerator(rng=random.Random(1234)),
        generation=UserGenerationSettings(default_count=10, max_count=100),
        logger=logger,
        mock_data=MockDataSettings(enable_initial_data=False),
    )
