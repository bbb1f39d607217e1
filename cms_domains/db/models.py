"""
SQLAlchemy ORM models for database tables.
"""
from sqlalchemy import Column, String, DateTime, Index, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class DomainModel(Base):
    """
    Domains table - hostname (or hostname + path) mapped to a content item.

    root_content_id is NULL for wildcard domains.
    """
    __tablename__ = "domains"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)  # e.g. "shop.example.com" or "example.com/en"
    root_content_id = Column(Integer, nullable=True)  # Owning content item
    language_iso_code = Column(String(14), nullable=True)  # e.g. "en-US"
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_domains_root_content_id', 'root_content_id'),
    )
