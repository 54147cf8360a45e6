import itertools
import threading
from typing import Dict, List, Optional

from mocking_api.users.models import User, UserPayload


class UserStore:
    """
    In-memory user records keyed by an auto-incrementing identifier.

    Every operation holds the same lock, so identifier assignment and map
    mutations never race under concurrent request handling. Records handed
    out are copies; callers cannot mutate stored state directly.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def create(self, payload: UserPayload) -> User:
        with self._lock:
            user = User(id=next(self._ids), **payload.model_dump())
            self._users[user.id] = user
            return user.model_copy()

    def update(self, user_id: int, payload: UserPayload) -> Optional[User]:
        """Replace every field of an existing record; never inserts."""
        with self._lock:
            if user_id not in self._users:
                return None
            user = User(id=user_id, **payload.model_dump())
            self._users[user_id] = user
            return user.model_copy()

    def delete(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._users)
