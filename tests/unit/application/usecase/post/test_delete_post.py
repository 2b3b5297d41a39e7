"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.post import DeletePostRequest, DeletePostUseCase
from agora.domain.error import AuthorizationError, NotFoundError
from agora.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=str(post.author_id))
        )

        # Assert
        assert response.success is True
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), user_id=str(uuid4()))
            )

        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), user_id=str(uuid4()))
            )
