"""
In-memory storage for user records.

``UserStore`` is a plain mapping from user id to record that lives
only as long as the process.  There is no eviction and no size bound.
One instance is created by the application factory and handed to the
service layer, so tests can start every case with an empty store.
"""

import threading
from typing import Dict, List, Optional

from users_api.app.schemas.user import User


class UserStore:
    """Process-local mapping of user id to ``User``.

    ``lock`` is a single coarse lock for the whole store.  Callers that
    read and then write hold it across both steps.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self.lock = threading.RLock()

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def set(self, user_id: str, user: User) -> None:
        self._users[user_id] = user

    def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def values(self) -> List[User]:
        """Return all records in insertion order."""
        return list(self._users.values())

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)
