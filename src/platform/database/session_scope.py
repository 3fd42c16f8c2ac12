"""
Session scoping shared by repository implementations.

A repository runs in one of two modes:
- standalone: opens its own session from session_factory and commits per call
- unit of work: the UoW injects a shared session; the repo only flushes and the UoW commits
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


SessionFactory = Callable[..., AsyncContextManager[AsyncSession]]


class SessionScopedRepo:
    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    async def _save(self, session: AsyncSession) -> None:
        if self.session is not None:
            await session.flush()
        else:
            await session.commit()
