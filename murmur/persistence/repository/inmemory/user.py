"""Dict-backed UserRepository for tests."""

from typing import Optional

from murmur.domain.model.user import User
from murmur.domain.repository.user import UserRepository
from murmur.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
