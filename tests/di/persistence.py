"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import PostRepository
from agora.persistence.repository.inmemory import InMemoryPostRepository
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope, so every request served by one container sees the same
    posts. Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
