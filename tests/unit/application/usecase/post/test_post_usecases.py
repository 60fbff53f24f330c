"""Unit tests for post use cases."""

from uuid import uuid4

import pytest

from debook.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
)
from debook.domain.error import NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_then_get_post(self, unit_env):
        """A created post should be retrievable with zeroed counters."""
        # Arrange
        create_use_case = await unit_env.get(CreatePostUseCase)
        get_use_case = await unit_env.get(GetPostUseCase)
        author_id = uuid4()

        # Act
        created = await create_use_case.execute(
            CreatePostRequest(content="First post", author_id=author_id)
        )
        fetched = await get_use_case.execute(GetPostRequest(post_id=created.id))

        # Assert
        assert fetched == created
        assert fetched.author_id == author_id
        assert fetched.likes_count == 0
        assert fetched.comments_count == 0

    @pytest.mark.asyncio
    async def test_response_serializes_camel_case(self, unit_env):
        """API responses use camelCase keys."""
        create_use_case = await unit_env.get(CreatePostUseCase)

        response = await create_use_case.execute(
            CreatePostRequest(content="Camel", author_id=uuid4())
        )
        data = response.model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "id",
            "content",
            "authorId",
            "likesCount",
            "commentsCount",
            "createdAt",
            "updatedAt",
        }


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Unknown post IDs should raise NotFoundError."""
        get_use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await get_use_case.execute(GetPostRequest(post_id=uuid4()))
