"""
Application layer - use cases and orchestration.

No direct dependencies on frameworks (FastAPI, etc.)
"""
from cms_domains.application.domain_service import DomainService

__all__ = ["DomainService"]
