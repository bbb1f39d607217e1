"""
Domain events for save/delete notifications.

Mutating DomainService operations run in two phases around the write:

    before_save / before_delete  -> listeners may veto (cancel)
    <repository write + commit>
    after_save / after_delete    -> informational, cannot be cancelled

Listeners subscribe to a DomainEventNotifier instance that the application
constructs and injects into the service. There is no global subscription list.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional
import enum
import inspect
import logging

from .entities import Domain, EventCancellationError

logger = logging.getLogger(__name__)


# ============================================
# Event messages
# ============================================

class EventMessageType(str, enum.Enum):
    """Severity of a message added by a listener"""
    DEFAULT = "default"
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"


@dataclass(frozen=True)
class EventMessage:
    """Message a listener wants to surface to the caller"""
    category: str
    message: str
    message_type: EventMessageType = EventMessageType.DEFAULT


class EventMessages:
    """
    Ordered, append-only collection of EventMessage.

    One instance is created per mutating call and shared by the
    before/after event args of that call, so the final OperationStatus
    carries everything listeners reported.
    """

    def __init__(self):
        self._messages: List[EventMessage] = []

    def add(self, message: EventMessage) -> None:
        self._messages.append(message)

    def get_all(self) -> List[EventMessage]:
        return list(self._messages)

    @property
    def count(self) -> int:
        return len(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[EventMessage]:
        return iter(self._messages)

    def __repr__(self) -> str:
        return f"EventMessages(count={len(self._messages)})"


# ============================================
# Event args
# ============================================

@dataclass
class DomainEventArgs:
    """Arguments passed to every listener hook"""

    domain: Domain
    messages: EventMessages
    can_cancel: bool = True
    cancelled: bool = field(default=False, init=False)

    def cancel(self, message: Optional[EventMessage] = None) -> None:
        """
        Veto the pending operation.

        Args:
            message: Optional explanation added to the shared messages

        Raises:
            EventCancellationError: If these args belong to an after-event
        """
        if not self.can_cancel:
            raise EventCancellationError(
                f"{type(self).__name__} for domain '{self.domain.name}' cannot be cancelled"
            )
        self.cancelled = True
        if message is not None:
            self.messages.add(message)


@dataclass
class SaveEventArgs(DomainEventArgs):
    pass


@dataclass
class DeleteEventArgs(DomainEventArgs):
    pass


# ============================================
# Listener interface and notifier
# ============================================

class DomainEventListener:
    """
    Base class for domain event subscribers.

    Override only the hooks you need. Hooks may be plain or async methods.
    Call args.cancel() in saving/deleting to veto the operation.
    """

    def saving(self, args: SaveEventArgs) -> None:
        pass

    def saved(self, args: SaveEventArgs) -> None:
        pass

    def deleting(self, args: DeleteEventArgs) -> None:
        pass

    def deleted(self, args: DeleteEventArgs) -> None:
        pass


class DomainEventNotifier:
    """
    Dispatches domain events to subscribed listeners.

    Listeners run synchronously in subscription order. Every listener is
    invoked even after one of them cancels. Listener exceptions are not
    caught: they propagate to the DomainService caller.
    """

    def __init__(self, listeners: Optional[List[DomainEventListener]] = None):
        self._listeners: List[DomainEventListener] = list(listeners or [])

    @property
    def listeners(self) -> List[DomainEventListener]:
        return list(self._listeners)

    def subscribe(self, listener: DomainEventListener) -> None:
        """Register a listener (no-op if already subscribed)"""
        if listener not in self._listeners:
            self._listeners.append(listener)
            logger.debug(f"Subscribed domain listener {type(listener).__name__}")

    def unsubscribe(self, listener: DomainEventListener) -> None:
        """Remove a listener (no-op if not subscribed)"""
        if listener in self._listeners:
            self._listeners.remove(listener)
            logger.debug(f"Unsubscribed domain listener {type(listener).__name__}")

    async def before_save(self, args: SaveEventArgs) -> bool:
        """Dispatch 'saving'. Returns True if a listener cancelled."""
        return await self._dispatch_cancelable("saving", args)

    async def after_save(self, args: SaveEventArgs) -> None:
        await self._dispatch("saved", args)

    async def before_delete(self, args: DeleteEventArgs) -> bool:
        """Dispatch 'deleting'. Returns True if a listener cancelled."""
        return await self._dispatch_cancelable("deleting", args)

    async def after_delete(self, args: DeleteEventArgs) -> None:
        await self._dispatch("deleted", args)

    async def _dispatch_cancelable(self, hook_name: str, args: DomainEventArgs) -> bool:
        if not args.can_cancel:
            raise EventCancellationError(f"'{hook_name}' requires cancelable event args")
        await self._dispatch(hook_name, args)
        return args.cancelled

    async def _dispatch(self, hook_name: str, args: DomainEventArgs) -> None:
        for listener in list(self._listeners):
            hook = getattr(listener, hook_name)
            if inspect.iscoroutinefunction(hook):
                await hook(args)
            else:
                hook(args)
