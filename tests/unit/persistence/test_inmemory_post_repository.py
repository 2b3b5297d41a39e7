"""Unit tests for InMemoryPostRepository."""

from datetime import datetime, timedelta

import pytest

from agora.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post


class TestInMemoryPostRepository:
    @pytest.mark.asyncio
    async def test_save_replaces_whole_document(self):
        repo = InMemoryPostRepository()
        post = make_post()
        await repo.save(post)

        liked = post.add_like(post.author_id)
        await repo.save(liked)

        assert await repo.find_by_id(post.id) == liked
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_find_all_orders_by_created_at_desc(self):
        repo = InMemoryPostRepository()
        now = datetime.now()
        middle = make_post(text="middle", created_at=now)
        oldest = make_post(text="oldest", created_at=now - timedelta(days=1))
        newest = make_post(text="newest", created_at=now + timedelta(days=1))
        for post in (middle, oldest, newest):
            await repo.save(post)

        posts = await repo.find_all()

        assert [p.text for p in posts] == ["newest", "middle", "oldest"]

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryPostRepository()
        post = make_post()
        await repo.save(post)

        await repo.delete(post.id)

        assert await repo.find_by_id(post.id) is None
