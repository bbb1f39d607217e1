"""
Core interfaces for the domain registry.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from cms_domains.domain.entities import Domain


class IDomainRepository(ABC):
    """
    Interface for domain storage and retrieval.

    Implementations operate inside a unit of work and never commit.
    """

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Check whether a domain with exactly this name exists"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional['Domain']:
        """Get domain by name"""
        pass

    @abstractmethod
    async def get(self, domain_id: int) -> Optional['Domain']:
        """Get domain by database ID"""
        pass

    @abstractmethod
    async def get_all(self, include_wildcards: bool) -> List['Domain']:
        """
        Get all domains.

        Args:
            include_wildcards: Include domains without a root content item

        Returns:
            Domains ordered by id
        """
        pass

    @abstractmethod
    async def get_assigned_domains(
        self,
        content_id: int,
        include_wildcards: bool
    ) -> List['Domain']:
        """Get domains whose root content item is content_id"""
        pass

    @abstractmethod
    async def add_or_update(self, domain: 'Domain') -> 'Domain':
        """
        Insert a new domain or update an existing one.

        Args:
            domain: Domain entity; inserted when domain.id is None

        Returns:
            The same entity, with id assigned on insert

        Raises:
            DuplicateDomainError: If another domain already uses the name
            DomainNotFoundError: If updating an id that doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, domain: 'Domain') -> None:
        """
        Delete a persisted domain.

        Raises:
            DomainNotFoundError: If no domain has domain.id
        """
        pass
