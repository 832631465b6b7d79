"""Repository dependency — picks the storage adapter from settings."""

from functools import lru_cache
from typing import AsyncGenerator

from app.config import get_settings
from app.models.base import AsyncSessionLocal
from app.repositories.base import Repository
from app.repositories.memory import InMemoryRepository
from app.repositories.sql import SqlRepository

settings = get_settings()


@lru_cache
def get_memory_repository() -> InMemoryRepository:
    return InMemoryRepository()


async def get_repository() -> AsyncGenerator[Repository, None]:
    """One repository per request; the SQL session commits only if the request succeeds."""
    if settings.storage_backend == "memory":
        yield get_memory_repository()
        return

    async with AsyncSessionLocal() as session:
        try:
            yield SqlRepository(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
