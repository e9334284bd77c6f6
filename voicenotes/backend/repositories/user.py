"""
User Repository.

In-memory user storage with lookup by id or username.
"""

from voicenotes.backend.core.exceptions import ConflictError
from voicenotes.backend.core.security import hash_password
from voicenotes.backend.models.user import User
from voicenotes.backend.repositories.base import BaseRepository


class InMemoryUserRepository(BaseRepository):
    """Users keyed by id; usernames are unique."""

    def __init__(self) -> None:
        super().__init__()
        self._users: dict[int, User] = {}

    async def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return next(
                (user for user in self._users.values() if user.username == username),
                None,
            )

    async def create_user(self, username: str, password: str) -> User:
        """
        Create a user, storing a bcrypt hash of the password.

        Raises:
            ValidationError: If username or password is empty
            ConflictError: If the username is taken
        """
        self._validate_required(
            {"username": username, "password": password},
            ["username", "password"],
        )
        hashed = hash_password(password)

        with self._lock:
            if any(user.username == username for user in self._users.values()):
                raise ConflictError("Username already registered")
            user = User(id=self._next_id(), username=username, password=hashed)
            self._users[user.id] = user

        return user
