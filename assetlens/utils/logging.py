"""Logger factory shared by every AssetLens module.

Modules create one logger at import time with ``LOGGER = get_logger(__name__)``.
Settings import this module, so the default level is read from the
``LOG_LEVEL`` environment variable directly rather than from ``settings``.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "INFO"


def resolve_level(level: Optional[str] = None) -> int:
    """Numeric level for a level name; unknown names fall back to INFO."""
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger writing to stdout.

    Args:
        name: Logger name, normally the calling module's ``__name__``
        level: Level name overriding ``LOG_LEVEL``

    Returns:
        logging.Logger: Logger with a single stdout handler
    """
    logger = logging.getLogger(name)
    log_level = resolve_level(level)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    # Level changes on an existing logger apply to its handler too
    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
