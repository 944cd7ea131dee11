"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from murmur.domain.model.user import User
from murmur.domain.value import UserId


class UserRepository(ABC):
    """Lookup of the identities that may comment.

    ``save`` exists for provisioning and tests; the API never creates users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def save(self, user: User) -> User: ...
