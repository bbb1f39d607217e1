"""
Domain Repository implementation using SQLAlchemy.

Handles conversion between:
- Domain entities → DomainModel rows
- DomainModel rows → Domain entities

Never commits: transaction boundaries belong to the unit of work.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, exists as sql_exists
from sqlalchemy.exc import IntegrityError
import logging

from cms_domains.core.interfaces import IDomainRepository
from cms_domains.domain.entities import Domain, DomainNotFoundError, DuplicateDomainError
from cms_domains.db.models import DomainModel

logger = logging.getLogger(__name__)


class DomainRepository(IDomainRepository):
    """SQLAlchemy implementation of IDomainRepository"""

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self._db = db_session

    async def exists(self, name: str) -> bool:
        result = await self._db.execute(
            select(sql_exists().where(DomainModel.name == name))
        )
        return bool(result.scalar())

    async def get_by_name(self, name: str) -> Optional[Domain]:
        result = await self._db.execute(
            select(DomainModel).where(DomainModel.name == name)
        )
        db_domain = result.scalar_one_or_none()
        return self._to_domain(db_domain) if db_domain else None

    async def get(self, domain_id: int) -> Optional[Domain]:
        db_domain = await self._db.get(DomainModel, domain_id)
        return self._to_domain(db_domain) if db_domain else None

    async def get_all(self, include_wildcards: bool) -> List[Domain]:
        stmt = select(DomainModel)
        if not include_wildcards:
            stmt = stmt.where(DomainModel.root_content_id.isnot(None))
        result = await self._db.execute(stmt.order_by(DomainModel.id))
        return [self._to_domain(row) for row in result.scalars().all()]

    async def get_assigned_domains(self, content_id: int, include_wildcards: bool) -> List[Domain]:
        stmt = select(DomainModel).where(DomainModel.root_content_id == content_id)
        if not include_wildcards:
            # Redundant for an integer content_id (NULL never matches)
            stmt = stmt.where(DomainModel.root_content_id.isnot(None))
        result = await self._db.execute(stmt.order_by(DomainModel.id))
        return [self._to_domain(row) for row in result.scalars().all()]

    async def add_or_update(self, domain: Domain) -> Domain:
        """
        Insert or update a domain.

        Raises:
            DuplicateDomainError: If another domain already uses the name
            DomainNotFoundError: If domain.id is set but no row exists
        """
        if await self._name_taken(domain.name, exclude_id=domain.id):
            logger.warning(f"Domain name '{domain.name}' is already in use")
            raise DuplicateDomainError(domain.name)

        try:
            if domain.id is None:
                db_domain = self._to_orm(domain)
                self._db.add(db_domain)
                await self._db.flush()
                domain.id = db_domain.id
                logger.info(f"💾 Added domain {domain.id} ({domain.name})")
            else:
                db_domain = await self._db.get(DomainModel, domain.id)
                if db_domain is None:
                    raise DomainNotFoundError(domain.id)
                db_domain.name = domain.name
                db_domain.root_content_id = domain.root_content_id
                db_domain.language_iso_code = domain.language_iso_code
                await self._db.flush()
                logger.info(f"💾 Updated domain {domain.id} ({domain.name})")

            return domain

        except IntegrityError as e:
            # Lost a race with a concurrent writer between the check and the flush
            logger.error(f"Domain '{domain.name}' already exists")
            raise DuplicateDomainError(domain.name) from e

    async def delete(self, domain: Domain) -> None:
        if domain.id is None:
            raise ValueError(f"Cannot delete domain '{domain.name}': it has not been saved")

        db_domain = await self._db.get(DomainModel, domain.id)
        if db_domain is None:
            raise DomainNotFoundError(domain.id)

        await self._db.delete(db_domain)
        await self._db.flush()
        logger.info(f"🗑️  Deleted domain {domain.id} ({domain.name})")

    async def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        condition = DomainModel.name == name
        if exclude_id is not None:
            condition = condition & (DomainModel.id != exclude_id)
        result = await self._db.execute(select(sql_exists().where(condition)))
        return bool(result.scalar())

    def _to_orm(self, domain: Domain) -> DomainModel:
        return DomainModel(
            id=domain.id,
            name=domain.name,
            root_content_id=domain.root_content_id,
            language_iso_code=domain.language_iso_code,
        )

    def _to_domain(self, db_domain: DomainModel) -> Domain:
        return Domain(
            id=db_domain.id,
            name=db_domain.name,
            root_content_id=db_domain.root_content_id,
            language_iso_code=db_domain.language_iso_code,
        )
