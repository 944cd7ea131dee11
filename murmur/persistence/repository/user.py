"""PostgreSQL user repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.model import User
from murmur.domain.repository import UserRepository
from murmur.domain.value import UserId
from murmur.persistence.mappers import row_to_user, user_to_dict
from murmur.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """UserRepository over the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_user(row) if row else None

    async def save(self, user: User) -> User:
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={"name": stmt.excluded["name"], "email": stmt.excluded["email"]},
        )

        await self.session.execute(stmt)
        await self.session.flush()
        return user
