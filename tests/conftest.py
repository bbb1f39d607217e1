"""
Pytest configuration and shared fixtures.
"""
from typing import List, Optional

import pytest_asyncio

from cms_domains.application.domain_service import DomainService
from cms_domains.db.connection import init_db, close_db, get_session_maker
from cms_domains.domain.events import (
    DomainEventListener,
    DomainEventNotifier,
    EventMessage,
    EventMessageType,
)
from cms_domains.domain.unit_of_work import SQLAlchemyUnitOfWorkProvider

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def database():
    """
    Fresh in-memory database for one test.

    StaticPool keeps the single connection alive, so every session
    opened during the test sees the same data.
    """
    await init_db(TEST_DATABASE_URL)

    yield

    await close_db()


@pytest_asyncio.fixture
async def uow_provider(database):
    return SQLAlchemyUnitOfWorkProvider(get_session_maker())


@pytest_asyncio.fixture
async def notifier():
    return DomainEventNotifier()


@pytest_asyncio.fixture
async def domain_service(uow_provider, notifier):
    return DomainService(uow_provider, notifier)


class RecordingListener(DomainEventListener):
    """Records every hook call; optionally vetoes saving/deleting"""

    def __init__(self, veto_save: bool = False, veto_delete: bool = False,
                 reason: Optional[str] = None):
        self.calls: List[str] = []
        self.veto_save = veto_save
        self.veto_delete = veto_delete
        self.reason = reason

    def _veto(self, args):
        message = None
        if self.reason:
            message = EventMessage("policy", self.reason, EventMessageType.WARNING)
        args.cancel(message)

    def saving(self, args):
        self.calls.append(f"saving:{args.domain.name}")
        if self.veto_save:
            self._veto(args)

    def saved(self, args):
        self.calls.append(f"saved:{args.domain.name}")

    def deleting(self, args):
        self.calls.append(f"deleting:{args.domain.name}")
        if self.veto_delete:
            self._veto(args)

    def deleted(self, args):
        self.calls.append(f"deleted:{args.domain.name}")
