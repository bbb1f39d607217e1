"""Core module containing interfaces and logging setup."""

from cms_domains.core.interfaces import IDomainRepository

__all__ = ["IDomainRepository"]
