"""
CMS Domain Registry - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI
import logging

from cms_domains.api import domains
from cms_domains.application.domain_service import DomainService
from cms_domains.application.listeners import DomainAuditListener
from cms_domains.config import settings
from cms_domains.core.logging import configure_logging
from cms_domains.db import init_db, close_db
from cms_domains.domain.events import DomainEventNotifier
from cms_domains.domain.unit_of_work import get_unit_of_work_provider
from cms_domains.version import __version__

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def build_domain_service() -> DomainService:
    """Wire DomainService to the initialised database with the default listeners"""
    notifier = DomainEventNotifier([DomainAuditListener()])
    return DomainService(get_unit_of_work_provider(), notifier)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown"""
    # Startup
    logger.info("🚀 Starting CMS Domain Registry")
    logger.info(f"📦 Version: {__version__}")
    logger.info(f"📝 Environment: {settings.environment}")

    await init_db()
    app.state.domain_service = build_domain_service()

    yield

    # Shutdown
    logger.info("👋 Shutting down CMS Domain Registry")
    app.state.domain_service = None
    await close_db()


app = FastAPI(
    title="CMS Domain Registry",
    description="Hostname-to-content mappings for multi-site routing",
    version=__version__,
    lifespan=lifespan
)

# Register domain routes
app.include_router(domains.router, prefix="/api/v1", tags=["domains"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "app": "CMS Domain Registry",
        "version": __version__,
        "status": "running",
        "environment": settings.environment
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
