"""
Built-in domain event listeners.
"""
import logging
from typing import Optional

from cms_domains.domain.events import DeleteEventArgs, DomainEventListener, SaveEventArgs

logger = logging.getLogger(__name__)


class DomainAuditListener(DomainEventListener):
    """Writes an audit line for every completed save/delete"""

    def __init__(self, audit_logger: Optional[logging.Logger] = None):
        self._logger = audit_logger or logger

    def saved(self, args: SaveEventArgs) -> None:
        domain = args.domain
        target = "wildcard" if domain.is_wildcard else f"content {domain.root_content_id}"
        self._logger.info(f"📝 Domain saved: {domain.name} -> {target} (id={domain.id})")

    def deleted(self, args: DeleteEventArgs) -> None:
        self._logger.info(f"📝 Domain deleted: {args.domain.name} (id={args.domain.id})")
