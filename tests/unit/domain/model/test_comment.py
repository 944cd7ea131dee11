"""Unit tests for the Comment entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from murmur.domain.value import Like, UserId
from tests.conftest import make_comment


class TestCommentLikes:
    """Tests for like bookkeeping on Comment."""

    def test_new_comment_has_no_likes(self):
        """A freshly built comment starts with an empty likes list."""
        comment = make_comment(user_id=UserId(uuid4()))

        assert comment.likes == []

    def test_is_liked_by_matches_exact_user(self):
        """is_liked_by should only match the users present in likes."""
        liker = UserId(uuid4())
        comment = make_comment(user_id=UserId(uuid4()), likes=[liker])

        assert comment.is_liked_by(liker)
        assert not comment.is_liked_by(UserId(uuid4()))

    def test_duplicate_likes_rejected(self):
        """A user may appear at most once in likes."""
        liker = UserId(uuid4())

        with pytest.raises(ValidationError):
            make_comment(user_id=UserId(uuid4()), likes=[liker, liker])

    def test_with_likes_rejects_duplicates(self):
        """Replacing likes re-checks that each user likes at most once."""
        liker = UserId(uuid4())
        comment = make_comment(user_id=UserId(uuid4()), likes=[liker])

        with pytest.raises(ValidationError):
            comment.with_likes([Like(user=liker), *comment.likes])

    def test_with_likes_keeps_other_fields(self):
        """Only likes change; the original comment is left untouched."""
        liker = UserId(uuid4())
        comment = make_comment(user_id=UserId(uuid4()))

        liked = comment.with_likes([Like(user=liker)])

        assert liked.likes == [Like(user=liker)]
        assert liked.id == comment.id
        assert liked.user_id == comment.user_id
        assert liked.date == comment.date
        assert comment.likes == []

    def test_like_value_equality(self):
        """Likes are compared by value."""
        user_id = UserId(uuid4())

        assert Like(user=user_id) == Like(user=user_id)


class TestCommentOwnership:
    """Tests for ownership checks on Comment."""

    def test_author_owns_comment(self):
        author = UserId(uuid4())
        comment = make_comment(user_id=author)

        assert comment.is_owned_by(author)

    def test_other_user_does_not_own_comment(self):
        comment = make_comment(user_id=UserId(uuid4()))

        assert not comment.is_owned_by(UserId(uuid4()))

    def test_comment_is_immutable(self):
        """Domain models are frozen; changes go through model_copy."""
        comment = make_comment(user_id=UserId(uuid4()))

        with pytest.raises(ValidationError):
            comment.text = "changed"
