"""
Unit of Work Pattern - one session shared by several repositories

Architecture:
- UoW owns the session lifecycle and the commit/rollback
- Repositories created by the UoW flush into the shared session instead of committing
- Use cases coordinate multi-step writes (seller + product) through the UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.session_scope import SessionFactory


if TYPE_CHECKING:
    from src.service.marketplace.app.interface.i_product_command_repo import (
        IProductCommandRepo,
    )
    from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
    from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
    from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
    from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Marketplace Service

    Usage:
        async with uow:
            seller = await uow.seller_command_repo.create(...)
            product = await uow.product_command_repo.create(...)
            await uow.commit()

    Leaving the block without commit rolls everything back.
    """

    user_query_repo: IUserQueryRepo
    user_command_repo: IUserCommandRepo
    seller_query_repo: ISellerQueryRepo
    seller_command_repo: ISellerCommandRepo
    product_command_repo: IProductCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation; opens a fresh session on every `async with`."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None
        self._session_cm = None

    async def __aenter__(self):
        from src.service.marketplace.driven_adapter.repo.product_command_repo_impl import (
            ProductCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.seller_command_repo_impl import (
            SellerCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.seller_query_repo_impl import (
            SellerQueryRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.user_command_repo_impl import (
            UserCommandRepoImpl,
        )
        from src.service.marketplace.driven_adapter.repo.user_query_repo_impl import (
            UserQueryRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Create repositories with shared session
        self.user_query_repo = UserQueryRepoImpl()
        self.user_query_repo.session = self.session
        self.user_command_repo = UserCommandRepoImpl()
        self.user_command_repo.session = self.session
        self.seller_query_repo = SellerQueryRepoImpl()
        self.seller_query_repo.session = self.session
        self.seller_command_repo = SellerCommandRepoImpl()
        self.seller_command_repo.session = self.session
        self.product_command_repo = ProductCommandRepoImpl()
        self.product_command_repo.session = self.session

        return await super().__aenter__()

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            session_cm, self._session_cm, self.session = self._session_cm, None, None
            if session_cm is not None:
                await session_cm.__aexit__(*args)

    async def _commit(self):
        if self.session is None:
            raise RuntimeError('Unit of work used outside its context')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
