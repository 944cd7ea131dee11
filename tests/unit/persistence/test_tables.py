"""Unit tests for the table definitions."""

from murmur.persistence.tables import comments_table


class TestCommentsTable:
    """Tests for constraints on the comments table."""

    def test_author_foreign_key_blocks_user_deletion(self):
        """Deleting a user must not take their comments with them."""
        (fk,) = comments_table.c.user_id.foreign_keys

        assert fk.target_fullname == "users.id"
        assert fk.ondelete == "RESTRICT"

    def test_post_id_has_no_foreign_key(self):
        assert not comments_table.c.post_id.foreign_keys
