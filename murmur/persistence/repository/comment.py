"""PostgreSQL comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.model import Comment
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId
from murmur.persistence.mappers import comment_to_dict, row_to_comment
from murmur.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """CommentRepository over the ``comments`` table.

    Every statement runs in the request's session; the transaction is
    committed by the session provider when the request ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()

        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_comment(row) if row else None

    async def find_all(self) -> List[Comment]:
        stmt = select(comments_table).order_by(comments_table.c.date.desc())
        rows = (await self.session.execute(stmt)).mappings().all()
        return [row_to_comment(row) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Insert the comment, or overwrite its mutable columns if it exists.

        Author, post and date are fixed at creation; only text and likes are
        written on conflict.
        """
        values = comment_to_dict(comment)
        stmt = insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={"text": stmt.excluded["text"], "likes": stmt.excluded["likes"]},
        )

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        await self.session.execute(
            comments_table.delete().where(comments_table.c.id == comment_id)
        )
        await self.session.flush()
