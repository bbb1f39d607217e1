"""
Logging setup shared by the HTTP application and the CLI.
"""
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Log level name (DEBUG, INFO, ...). Defaults to settings.log_level.
    """
    if level is None:
        from cms_domains.config import settings
        level = settings.log_level

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        logging.getLogger(__name__).warning(f"Unknown log level '{level}', falling back to INFO")
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    # SQLAlchemy engine logging is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
