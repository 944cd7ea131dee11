"""Table definitions. Keep in step with the Alembic migrations."""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# Accounts are provisioned elsewhere; rows here only back identity lookups
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    ),
)

comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # No foreign key: posts are owned by another service
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("text", Text, nullable=False),
    # [{"user": "<uuid>"}, ...], newest like first
    Column("likes", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column(
        "date", TIMESTAMP(timezone=True), nullable=False, server_default=text("now()")
    ),
)

Index("idx_comments_date", comments_table.c.date.desc())
Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_user_id", comments_table.c.user_id)
