"""Unit tests for AddCommentUseCase and RemoveCommentUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from agora.domain.error import CommentNotFoundError, NotFoundError, ValidationError
from agora.domain.repository import PostRepository
from agora.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)
        user_id = str(uuid4())

        # Act
        response = await use_case.execute(
            AddCommentRequest(
                post_id=str(post.id),
                user_id=user_id,
                text="Great post",
                name="Bob",
                avatar="http://img/bob.png",
            )
        )

        # Assert
        assert len(response.comments) == 1
        comment = response.comments[0]
        assert comment.user_id == user_id
        assert comment.text == "Great post"
        assert comment.name == "Bob"
        assert comment.avatar == "http://img/bob.png"

    @pytest.mark.asyncio
    async def test_invalid_text(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                AddCommentRequest(post_id=str(uuid4()), user_id=str(uuid4()), text="x")
            )

        assert exc_info.value.errors == {
            "text": "Comment must be between 2 and 300 characters"
        }

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(
                    post_id=str(uuid4()), user_id=str(uuid4()), text="hello"
                )
            )


class TestRemoveCommentUseCase:
    """Tests for RemoveCommentUseCase."""

    @pytest.mark.asyncio
    async def test_remove_comment(self, unit_env):
        use_case = await unit_env.get(RemoveCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = (
            make_post()
            .add_comment(UserId(uuid4()), "older comment")
            .add_comment(UserId(uuid4()), "newer comment")
        )
        await post_repo.save(post)

        response = await use_case.execute(
            RemoveCommentRequest(
                post_id=str(post.id),
                comment_id=str(post.comments[0].id),
                user_id=str(uuid4()),
            )
        )

        assert [c.text for c in response.comments] == ["older comment"]

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(RemoveCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        with pytest.raises(CommentNotFoundError):
            await use_case.execute(
                RemoveCommentRequest(
                    post_id=str(post.id), comment_id=str(uuid4()), user_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, unit_env):
        use_case = await unit_env.get(RemoveCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        with pytest.raises(CommentNotFoundError):
            await use_case.execute(
                RemoveCommentRequest(
                    post_id=str(post.id), comment_id="nope", user_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post_reported_before_comment(self, unit_env):
        use_case = await unit_env.get(RemoveCommentUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                RemoveCommentRequest(
                    post_id=str(uuid4()), comment_id="nope", user_id=str(uuid4())
                )
            )

        assert not isinstance(exc_info.value, CommentNotFoundError)
