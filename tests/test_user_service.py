import pytest

from mocking_api.config.settings import MockDataSettings, UserGenerationSettings
from mocking_api.shared.errors import GenerationLimitExceededError
from mocking_api.users.generator import COUNTRIES, UserGenerator
from mocking_api.users.models import UserPayload
from mocking_api.users.services import SAMPLE_USERS, UserService
from mocking_api.users.store import UserStore


def build_service(logger, mock_data=None, default_count=10, max_count=100):
    return UserService(
        store=UserStore(),
        generator=UserGenerator(),
        generation=UserGenerationSettings(default_count=default_count, max_count=max_count),
        logger=logger,
        mock_data=mock_data,
    )


def test_generate_with_count_creates_exactly_that_many(service):
    users = service.generate_users(5)

    assert len(users) == 5
    assert len({user.id for user in users}) == 5
    listed_ids = {user.id for user in service.list_users()}
    assert {user.id for user in users} <= listed_ids
    for user in users:
        assert "@example.com" in user.email
        assert user.country in COUNTRIES


@pytest.mark.parametrize("count", [0, -3, None])
def test_generate_non_positive_uses_default(service, count):
    users = service.generate_users(count)
    assert len(users) == 10


def test_generate_at_maximum_is_allowed(logger):
    service = build_service(logger, default_count=2, max_count=4)
    assert len(service.generate_users(4)) == 4


def test_generate_above_maximum_is_rejected_and_creates_nothing(service):
    with pytest.raises(GenerationLimitExceededError) as exc_info:
        service.generate_users(101)

    assert exc_info.value.maximum == 100
    assert exc_info.value.requested == 101
    assert exc_info.value.status_code == 400
    assert service.list_users() == []


def test_generation_config(service):
    config = service.generation_config()
    assert config.default_generation_count == 10
    assert config.max_generation_count == 100
    assert config.model_dump(by_alias=True) == {"defaultGenerationCount": 10, "maxGenerationCount": 100}


def test_crud_round(service):
    created = service.create_user(UserPayload(first_name="Ada", email="ada@example.com"))
    assert service.get_user(created.id) == created

    updated = service.update_user(created.id, UserPayload(first_name="Grace"))
    assert updated.first_name == "Grace"
    assert updated.email is None

    assert service.delete_user(created.id) is True
    assert service.get_user(created.id) is None
    assert service.update_user(created.id, UserPayload()) is None
    assert service.delete_user(created.id) is False


def test_initial_data_seeded(logger):
    service = build_service(logger, mock_data=MockDataSettings(initial_users_count=3))

    users = service.list_users()
    assert [user.email for user in users] == [u.email for u in SAMPLE_USERS[:3]]
    assert [user.id for user in users] == [1, 2, 3]


def test_initial_data_capped_at_sample_size(logger):
    service = build_service(logger, mock_data=MockDataSettings(initial_users_count=50))
    assert len(service.list_users()) == len(SAMPLE_USERS)


def test_initial_data_disabled(logger):
    service = build_service(logger, mock_data=MockDataSettings(enable_initial_data=False, initial_users_count=5))
    assert service.list_users() == []
