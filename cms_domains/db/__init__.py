"""Database package - all database-related code."""
from cms_domains.db.connection import init_db, get_session_maker, close_db
from cms_domains.db.models import Base, DomainModel

__all__ = [
    "init_db",
    "get_session_maker",
    "close_db",
    "Base",
    "DomainModel",
]
