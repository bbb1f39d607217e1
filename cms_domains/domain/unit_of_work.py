"""
Unit of Work pattern for transaction management.

The Unit of Work pattern ensures:
1. All repository operations in a scope share one transaction
2. Nothing is persisted unless commit() is called explicitly
3. The scope is rolled back and closed on every other exit path

Read-only scopes are opened with readonly=True and refuse to commit.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
import logging

from .entities import ReadOnlyUnitOfWorkError

if TYPE_CHECKING:
    from cms_domains.core.interfaces import IDomainRepository

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """
    Abstract Unit of Work for transaction management.

    Provides:
    - Transaction boundaries (commit/rollback)
    - Repository access (domains)
    """

    domains: 'IDomainRepository'
    readonly: bool = False
    committed: bool = False

    async def __aenter__(self):
        """Enter async context"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Exit async context.

        Rolls back if an exception escaped or nothing was committed,
        then releases resources.
        """
        try:
            if exc_type is not None or not self.committed:
                await self.rollback()
        finally:
            await self.close()

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass

    @abstractmethod
    async def close(self):
        """Close resources"""
        pass


class AbstractUnitOfWorkProvider(ABC):
    """Opens units of work. Injected into DomainService."""

    @abstractmethod
    def get_unit_of_work(self, readonly: bool = False) -> AbstractUnitOfWork:
        pass


class SQLAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation of Unit of Work."""

    def __init__(self, session: AsyncSession, readonly: bool = False):
        """
        Initialize Unit of Work.

        Args:
            session: SQLAlchemy async session
            readonly: Refuse to commit when True
        """
        self._session = session
        self.readonly = readonly
        self.committed = False

        # Import here to avoid circular dependencies
        from cms_domains.repositories.domain_repository import DomainRepository

        self.domains = DomainRepository(session)

    async def commit(self):
        """
        Commit transaction.

        Raises:
            ReadOnlyUnitOfWorkError: If this unit of work is read-only
        """
        if self.readonly:
            raise ReadOnlyUnitOfWorkError("Cannot commit a read-only unit of work")

        await self._session.commit()
        self.committed = True
        logger.debug("✅ Transaction committed")

    async def rollback(self):
        """Rollback transaction, discarding all pending changes"""
        await self._session.rollback()
        if not self.readonly:
            logger.debug("↩️  Transaction rolled back")

    async def close(self):
        """Close session and release resources"""
        await self._session.close()


class SQLAlchemyUnitOfWorkProvider(AbstractUnitOfWorkProvider):
    """Creates one SQLAlchemyUnitOfWork (and session) per scope."""

    def __init__(self, session_maker: async_sessionmaker):
        self._session_maker = session_maker

    def get_unit_of_work(self, readonly: bool = False) -> AbstractUnitOfWork:
        """
        Open a new unit of work.

        Usage:
            async with provider.get_unit_of_work() as uow:
                await uow.domains.add_or_update(domain)
                await uow.commit()
        """
        return SQLAlchemyUnitOfWork(self._session_maker(), readonly=readonly)


def get_unit_of_work_provider() -> AbstractUnitOfWorkProvider:
    """
    Factory function for the default provider.

    Returns:
        Provider bound to the database initialised by init_db()

    Raises:
        RuntimeError: If the database has not been initialised
    """
    from cms_domains.db.connection import get_session_maker
    return SQLAlchemyUnitOfWorkProvider(get_session_maker())
