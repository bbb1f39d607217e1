"""
Domain Entities - business objects with identity and lifecycle.

A Domain maps a hostname (or hostname + path) to the content item that
acts as the root of a site. Domains without a root content item are
"wildcard" domains: they carry culture information for a branch of the
content tree but do not route requests on their own.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Domain:
    """
    Domain entity.

    Invariants (enforced here):
    1. name is non-empty after stripping whitespace
    2. root_content_id, when set, is a positive content id

    Name uniqueness is enforced by storage.
    """

    name: str
    root_content_id: Optional[int] = None
    language_iso_code: Optional[str] = None

    # Identity (assigned by storage on first save)
    id: Optional[int] = None

    def __post_init__(self):
        if self.name is None or not self.name.strip():
            raise ValueError("Domain name cannot be empty")
        self.name = self.name.strip()

        if self.root_content_id is not None and self.root_content_id <= 0:
            raise ValueError(
                f"Invalid root_content_id: {self.root_content_id}. "
                f"Must be a positive content id."
            )

        if self.language_iso_code is not None and not self.language_iso_code.strip():
            self.language_iso_code = None

    @property
    def is_wildcard(self) -> bool:
        """Wildcard domains have no owning content item"""
        return self.root_content_id is None

    @property
    def has_identity(self) -> bool:
        """Check if domain has been persisted"""
        return self.id is not None

    def __repr__(self) -> str:
        return (
            f"Domain(id={self.id}, name={self.name!r}, "
            f"root_content_id={self.root_content_id}, "
            f"language={self.language_iso_code})"
        )


# ============================================
# Domain Exceptions
# ============================================

class DomainRegistryError(Exception):
    """Base exception for domain registry errors"""
    pass


class DuplicateDomainError(DomainRegistryError):
    """Raised when attempting to save a domain whose name is already taken"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Domain '{name}' already exists")


class DomainNotFoundError(DomainRegistryError):
    """Raised when a domain doesn't exist"""

    def __init__(self, domain_id: int):
        self.domain_id = domain_id
        super().__init__(f"Domain {domain_id} not found")


class ReadOnlyUnitOfWorkError(DomainRegistryError):
    """Raised when committing a read-only unit of work"""
    pass


class EventCancellationError(DomainRegistryError):
    """Raised when cancelling an event that cannot be cancelled"""
    pass
