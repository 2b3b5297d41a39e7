"""Unit tests for CreatePostUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.post import CreatePostRequest, CreatePostUseCase
from agora.domain.error import ValidationError
from agora.domain.repository import PostRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_returns_response(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                author_id=author_id,
                text="Hello world",
                name="Alice",
                avatar="http://img/alice.png",
            )
        )

        # Assert
        assert response.author_id == author_id
        assert response.text == "Hello world"
        assert response.name == "Alice"
        assert response.avatar == "http://img/alice.png"
        assert response.likes == []
        assert response.comments == []

    @pytest.mark.asyncio
    async def test_missing_text_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreatePostRequest(author_id=str(uuid4())))

        assert exc_info.value.errors == {"text": "Text field is required"}
        assert await post_repo.find_all() == []
