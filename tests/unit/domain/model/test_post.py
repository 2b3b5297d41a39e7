"""Unit tests for the Post aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from agora.domain.error import (
    CommentNotFoundError,
    DuplicateLikeError,
    LikeNotFoundError,
)
from agora.domain.model import Like, Post
from agora.domain.value import CommentId, LikeId, PostId, UserId
from tests.conftest import make_post


class TestPostFields:
    def test_text_length_is_enforced(self):
        with pytest.raises(PydanticValidationError):
            Post(id=PostId(uuid4()), author_id=UserId(uuid4()), text="a")

    def test_post_is_immutable(self):
        post = make_post()

        with pytest.raises(PydanticValidationError):
            post.text = "changed"


class TestLikes:
    """Tests for add_like and remove_like."""

    def test_add_like_prepends(self):
        first, second = UserId(uuid4()), UserId(uuid4())
        post = make_post().add_like(first).add_like(second)

        assert [like.user_id for like in post.likes] == [second, first]
        assert post.has_liked(first)

    def test_add_like_returns_new_post(self):
        post = make_post()
        liked = post.add_like(UserId(uuid4()))

        assert post.likes == []
        assert len(liked.likes) == 1

    def test_duplicate_like_raises(self):
        user_id = UserId(uuid4())
        post = make_post().add_like(user_id)

        with pytest.raises(DuplicateLikeError):
            post.add_like(user_id)

    def test_remove_like(self):
        user_id = UserId(uuid4())
        other = UserId(uuid4())
        post = make_post().add_like(user_id).add_like(other)

        result = post.remove_like(user_id)

        assert [like.user_id for like in result.likes] == [other]

    def test_remove_like_removes_only_first_match(self):
        """Legacy data may hold duplicate likes; one is removed per call."""
        user_id = UserId(uuid4())
        post = make_post().model_copy(
            update={
                "likes": [
                    Like(id=LikeId(uuid4()), user_id=user_id),
                    Like(id=LikeId(uuid4()), user_id=user_id),
                ]
            }
        )

        result = post.remove_like(user_id)

        assert len(result.likes) == 1
        assert result.likes[0].id == post.likes[1].id

    def test_remove_like_without_like_raises(self):
        with pytest.raises(LikeNotFoundError):
            make_post().remove_like(UserId(uuid4()))


class TestComments:
    """Tests for add_comment and remove_comment."""

    def test_add_comment_prepends(self):
        user_id = UserId(uuid4())
        post = (
            make_post()
            .add_comment(user_id, "first comment", name="Bob")
            .add_comment(user_id, "second comment", name="Bob")
        )

        assert [c.text for c in post.comments] == ["second comment", "first comment"]
        assert post.comments[0].name == "Bob"
        assert post.comments[0].user_id == user_id

    def test_remove_comment_removes_exactly_that_comment(self):
        user_id = UserId(uuid4())
        post = make_post().add_comment(user_id, "keep me").add_comment(
            user_id, "drop me"
        )
        target = post.comments[0]

        result = post.remove_comment(target.id)

        assert [c.text for c in result.comments] == ["keep me"]
        assert result.find_comment(target.id) is None

    def test_remove_missing_comment_raises(self):
        post = make_post().add_comment(UserId(uuid4()), "only one")

        with pytest.raises(CommentNotFoundError):
            post.remove_comment(CommentId(uuid4()))

    def test_other_fields_untouched(self):
        post = make_post(text="original", name="Alice")
        result = post.add_comment(UserId(uuid4()), "hi there")

        assert result.id == post.id
        assert result.author_id == post.author_id
        assert result.text == "original"
        assert result.name == "Alice"
        assert result.created_at == post.created_at
