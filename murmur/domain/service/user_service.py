"""Resolution of caller IDs to user records."""

import logfire

from murmur.domain.error import NotFoundError
from murmur.domain.model import User
from murmur.domain.repository import UserRepository
from murmur.domain.value import UserId


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Load a user.

        Raises:
            NotFoundError: If no user has this ID
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user
