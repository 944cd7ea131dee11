"""User entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from murmur.domain.model.common import DomainModel
from murmur.domain.value import UserId


class User(DomainModel):
    """An identity that can author and like comments.

    Accounts are provisioned outside this service, which only resolves them.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
