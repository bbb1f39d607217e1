"""
Outcome of a mutating DomainService operation.
"""

from dataclasses import dataclass, field
import enum

from .events import EventMessages


class OperationStatusType(str, enum.Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OperationStatus:
    """
    Result of save/delete.

    Failures are not represented here: storage errors are raised.
    CANCELLED means a listener vetoed the operation and nothing was written.
    """

    status_type: OperationStatusType
    event_messages: EventMessages = field(default_factory=EventMessages)

    @classmethod
    def succeeded(cls, event_messages: EventMessages) -> "OperationStatus":
        return cls(OperationStatusType.SUCCESS, event_messages)

    @classmethod
    def cancelled(cls, event_messages: EventMessages) -> "OperationStatus":
        return cls(OperationStatusType.CANCELLED, event_messages)

    @property
    def is_success(self) -> bool:
        return self.status_type == OperationStatusType.SUCCESS

    @property
    def is_cancelled(self) -> bool:
        return self.status_type == OperationStatusType.CANCELLED
