"""Identifier types.

Every identifier is a UUID. Distinct NewTypes keep a post ID from being
passed where a comment ID is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
