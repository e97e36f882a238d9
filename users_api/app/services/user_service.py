"""
Business logic for users.

``UserService`` stores users in an injected ``UserStore`` and provides
the list, get, create, update and delete operations.  Errors are
raised as subclasses of ``UserServiceError``; the HTTP layer maps them
to status codes.
"""

import logging
import re
import uuid
from typing import Any, List

from users_api.app.core.store import UserStore
from users_api.app.schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class UserServiceError(Exception):
    """Base class for errors raised by ``UserService``."""


class InvalidUserIdError(UserServiceError, ValueError):
    """The identifier is not a textual UUID."""


class MissingFieldsError(UserServiceError, ValueError):
    """``username`` or ``age`` is absent or falsy on create."""


class UserNotFoundError(UserServiceError, LookupError):
    """No record is stored under a well-formed identifier."""


def is_valid_user_id(user_id: str) -> bool:
    """Return True if ``user_id`` has the 8-4-4-4-12 hex UUID layout."""
    return bool(UUID_PATTERN.match(user_id))


def _provided(value: Any) -> bool:
    # Empty strings, zero, empty lists and None all count as "not given".
    return value is not None and bool(value)


class UserService:
    """Сервис для работы с пользователями.

    Every public method takes the store lock for the whole of its store
    access so that read-modify-write sequences are not interleaved when
    requests are handled concurrently.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def _check_id(self, user_id: str) -> None:
        if not is_valid_user_id(user_id):
            raise InvalidUserIdError(f"Invalid user id {user_id!r}")

    def _require(self, user_id: str) -> User:
        self._check_id(user_id)
        user = self.store.get(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    async def list_users(self) -> List[User]:
        """Return every stored user in insertion order."""
        with self.store.lock:
            return self.store.values()

    async def get_user(self, user_id: str) -> User:
        """Retrieve a user by ID.

        Raises ``InvalidUserIdError`` before looking anything up, then
        ``UserNotFoundError`` if no such record exists.
        """
        with self.store.lock:
            return self._require(user_id)

    async def create_user(self, data: UserCreate) -> User:
        """Create a new user and return the stored record.

        ``username`` and ``age`` must both be truthy, otherwise
        ``MissingFieldsError`` is raised and nothing is stored.  The id
        is a fresh ``uuid4``; collisions are not retried.
        """
        if not (_provided(data.username) and _provided(data.age)):
            raise MissingFieldsError("Missing required fields")
        with self.store.lock:
            user_id = str(uuid.uuid4())
            user = User(
                id=user_id,
                username=data.username,
                age=data.age,
                hobbies=list(data.hobbies) if data.hobbies is not None else [],
            )
            self.store.set(user_id, user)
        logger.info("Created user %s (%s)", user_id, user.username)
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        """Partially update a user in place.

        Only truthy values overwrite: ``age: 0``, ``username: ""`` and
        ``hobbies: []`` leave the stored value untouched.
        """
        with self.store.lock:
            user = self._require(user_id)
            changed = []
            for field_name in ("username", "age", "hobbies"):
                value = getattr(data, field_name)
                if _provided(value):
                    setattr(user, field_name, list(value) if field_name == "hobbies" else value)
                    changed.append(field_name)
        logger.info("Updated user %s: %s", user_id, ", ".join(changed) or "no changes")
        return user

    async def delete_user(self, user_id: str) -> None:
        """Удалить пользователя по ID.

        Raises ``InvalidUserIdError`` or ``UserNotFoundError`` like
        ``get_user``.
        """
        with self.store.lock:
            self._require(user_id)
            self.store.delete(user_id)
        logger.info("Deleted user %s", user_id)
