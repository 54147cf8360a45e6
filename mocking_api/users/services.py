from typing import List, Optional

from mocking_api.config.settings import MockDataSettings, UserGenerationSettings
from mocking_api.shared.errors import GenerationLimitExceededError
from mocking_api.shared.logger import StructuredLogger
from mocking_api.users.generator import UserGenerator
from mocking_api.users.models import GenerationConfig, User, UserPayload
from mocking_api.users.store import UserStore

SAMPLE_USERS = (
    UserPayload(first_name="John", last_name="Doe", email="john.doe@email.com", phone="+1-555-0123",
                address="123 Main St", city="New York", country="USA"),
    UserPayload(first_name="Jane", last_name="Smith", email="jane.smith@email.com", phone="+1-555-0124",
                address="456 Oak Ave", city="Los Angeles", country="USA"),
    UserPayload(first_name="Bob", last_name="Johnson", email="bob.johnson@email.com", phone="+1-555-0125",
                address="789 Pine Rd", city="Chicago", country="USA"),
    UserPayload(first_name="Alice", last_name="Brown", email="alice.brown@email.com", phone="+1-555-0126",
                address="321 Elm St", city="Houston", country="USA"),
    UserPayload(first_name="Charlie", last_name="Davis", email="charlie.davis@email.com", phone="+1-555-0127",
                address="654 Maple Dr", city="Phoenix", country="USA"),
)


class UserService:
    """
    User operations on top of a UserStore.
    Adds logging, generation bounds and the optional initial sample data.
    """

    def __init__(
        self,
        store: UserStore,
        generator: UserGenerator,
        generation: UserGenerationSettings,
        logger: StructuredLogger,
        mock_data: Optional[MockDataSettings] = None,
    ):
        self.store = store
        self.generator = generator
        self.generation = generation
        self.logger = logger

        if mock_data and mock_data.enable_initial_data:
            self._seed(mock_data.initial_users_count)

    def _seed(self, count: int):
        for payload in SAMPLE_USERS[:count]:
            self.store.create(payload)
        self.logger.info("Initial mock data loaded", count=min(count, len(SAMPLE_USERS)))

    def list_users(self) -> List[User]:
        users = self.store.list()
        self.logger.info("Retrieved users", count=len(users))
        return users

    def get_user(self, user_id: int) -> Optional[User]:
        user = self.store.get(user_id)
        if user is None:
            self.logger.warning("User not found", user_id=user_id)
        return user

    def create_user(self, payload: UserPayload) -> User:
        user = self.store.create(payload)
        self.logger.info("User created", user_id=user.id, email=user.email)
        return user

    def update_user(self, user_id: int, payload: UserPayload) -> Optional[User]:
        user = self.store.update(user_id, payload)
        if user is None:
            self.logger.warning("User not found for update", user_id=user_id)
        else:
            self.logger.info("User updated", user_id=user_id, email=user.email)
        return user

    def delete_user(self, user_id: int) -> bool:
        deleted = self.store.delete(user_id)
        if deleted:
            self.logger.info("User deleted", user_id=user_id)
        else:
            self.logger.warning("User not found for deletion", user_id=user_id)
        return deleted

    def generate_users(self, count: Optional[int] = None) -> List[User]:
        """
        Create ``count`` random users.
        A missing or non-positive count falls back to the configured default;
        a count above the configured maximum is rejected before anything is created.
        """
        if count is None or count <= 0:
            count = self.generation.default_count

        if count > self.generation.max_count:
            self.logger.warning(
                "Generation count exceeds maximum",
                requested=count,
                maximum=self.generation.max_count,
            )
            raise GenerationLimitExceededError(count, self.generation.max_count)

        users = [self.store.create(payload) for payload in self.generator.generate(count)]
        self.logger.info("Users generated", count=len(users))
        return users

    def count_users(self) -> int:
        return self.store.count()

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            default_generation_count=self.generation.default_count,
            max_generation_count=self.generation.max_count,
        )
