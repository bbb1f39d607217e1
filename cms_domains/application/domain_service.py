"""
Domain Service - the registry facade for domain records.

Every operation opens its own unit of work:
- Reads use a read-only scope and return repository results directly.
- save/delete dispatch a cancelable "before" event, write, commit, and
  dispatch an "after" event.

A cancelled save/delete still commits its (empty) unit of work and
returns OperationStatus.cancelled(). Storage errors are not caught.
"""

from typing import Callable, List, Optional
import logging

from cms_domains.domain.entities import Domain
from cms_domains.domain.events import (
    DeleteEventArgs,
    DomainEventNotifier,
    EventMessages,
    SaveEventArgs,
)
from cms_domains.domain.operation_status import OperationStatus
from cms_domains.domain.unit_of_work import AbstractUnitOfWorkProvider

logger = logging.getLogger(__name__)


class DomainService:
    """
    Application service for domain operations.

    Collaborators are injected:
    - uow_provider: opens read-only / read-write units of work
    - notifier: dispatches saving/saved/deleting/deleted to listeners
    - event_messages_factory: creates the message set shared by one call's events
    """

    def __init__(
        self,
        uow_provider: AbstractUnitOfWorkProvider,
        notifier: Optional[DomainEventNotifier] = None,
        event_messages_factory: Callable[[], EventMessages] = EventMessages,
    ):
        self._uow_provider = uow_provider
        self._notifier = notifier if notifier is not None else DomainEventNotifier()
        self._event_messages_factory = event_messages_factory

    @property
    def notifier(self) -> DomainEventNotifier:
        return self._notifier

    async def exists(self, name: str) -> bool:
        async with self._uow_provider.get_unit_of_work(readonly=True) as uow:
            return await uow.domains.exists(name)

    async def get_by_name(self, name: str) -> Optional[Domain]:
        async with self._uow_provider.get_unit_of_work(readonly=True) as uow:
            return await uow.domains.get_by_name(name)

    async def get_by_id(self, domain_id: int) -> Optional[Domain]:
        async with self._uow_provider.get_unit_of_work(readonly=True) as uow:
            return await uow.domains.get(domain_id)

    async def get_all(self, include_wildcards: bool) -> List[Domain]:
        async with self._uow_provider.get_unit_of_work(readonly=True) as uow:
            return await uow.domains.get_all(include_wildcards)

    async def get_assigned_domains(self, content_id: int, include_wildcards: bool) -> List[Domain]:
        async with self._uow_provider.get_unit_of_work(readonly=True) as uow:
            return await uow.domains.get_assigned_domains(content_id, include_wildcards)

    async def save(self, domain: Domain) -> OperationStatus:
        """
        Insert or update a domain.

        Args:
            domain: Domain entity; its id is assigned on first save

        Returns:
            OperationStatus.succeeded, or cancelled if a 'saving' listener vetoed

        Raises:
            DuplicateDomainError: If another domain already uses the name
            DomainNotFoundError: If updating a domain that no longer exists
        """
        event_messages = self._event_messages_factory()

        async with self._uow_provider.get_unit_of_work() as uow:
            if await self._notifier.before_save(SaveEventArgs(domain, event_messages)):
                await uow.commit()
                logger.warning(
                    f"⛔ Save of domain '{domain.name}' cancelled by listener"
                    f"{self._describe(event_messages)}"
                )
                return OperationStatus.cancelled(event_messages)

            await uow.domains.add_or_update(domain)
            await uow.commit()

            await self._notifier.after_save(
                SaveEventArgs(domain, event_messages, can_cancel=False)
            )
            logger.info(f"✅ Saved domain {domain.id} ({domain.name})")
            return OperationStatus.succeeded(event_messages)

    async def delete(self, domain: Domain) -> OperationStatus:
        """
        Delete a domain.

        Returns:
            OperationStatus.succeeded, or cancelled if a 'deleting' listener vetoed

        Raises:
            DomainNotFoundError: If the domain doesn't exist
        """
        event_messages = self._event_messages_factory()

        async with self._uow_provider.get_unit_of_work() as uow:
            if await self._notifier.before_delete(DeleteEventArgs(domain, event_messages)):
                await uow.commit()
                logger.warning(
                    f"⛔ Delete of domain '{domain.name}' cancelled by listener"
                    f"{self._describe(event_messages)}"
                )
                return OperationStatus.cancelled(event_messages)

            await uow.domains.delete(domain)
            await uow.commit()

            await self._notifier.after_delete(
                DeleteEventArgs(domain, event_messages, can_cancel=False)
            )
            logger.info(f"✅ Deleted domain {domain.id} ({domain.name})")
            return OperationStatus.succeeded(event_messages)

    @staticmethod
    def _describe(event_messages: EventMessages) -> str:
        if not len(event_messages):
            return ""
        return ": " + "; ".join(f"[{m.category}] {m.message}" for m in event_messages)
