"""Value objects."""

from murmur.domain.value.common import ValueObject
from murmur.domain.value.identifiers import UserId


class Like(ValueObject):
    """One user's like on a comment. A comment holds at most one per user."""

    user: UserId
