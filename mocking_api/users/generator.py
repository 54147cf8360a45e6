import random
from typing import List, Optional

from mocking_api.users.models import UserPayload

FIRST_NAMES = ("Alex", "Sam", "Jordan", "Taylor", "Casey", "Morgan", "Riley", "Avery", "Quinn", "Dakota")
LAST_NAMES = ("Wilson", "Martinez", "Garcia", "Lopez", "Anderson", "Thomas", "Jackson", "White", "Harris", "Clark")
CITIES = ("Seattle", "Denver", "Austin", "Portland", "Nashville", "Atlanta", "Boston", "Miami", "Detroit", "Minneapolis")
COUNTRIES = ("USA", "Canada", "UK", "Australia", "Germany")

EMAIL_DOMAIN = "example.com"


class UserGenerator:
    """Builds plausible fake users from fixed vocabularies."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def build(self) -> UserPayload:
        first_name = self.rng.choice(FIRST_NAMES)
        last_name = self.rng.choice(LAST_NAMES)
        return UserPayload(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}@{EMAIL_DOMAIN}",
            phone=f"+1-555-{self.rng.randrange(10000):04d}",
            address=f"{self.rng.randint(1, 999)} {self.rng.choice(FIRST_NAMES)} St",
            city=self.rng.choice(CITIES),
            country=self.rng.choice(COUNTRIES),
        )

    def generate(self, count: int) -> List[UserPayload]:
        return [self.build() for _ in range(count)]
