"""
Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this module only
installs the root handler and level once per process.
"""

import logging
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    _configured = True
