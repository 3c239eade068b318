"""
Logging setup for the vsort command line.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level_name):
    """Configure root logging on stderr; unknown level names fall back to WARNING"""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        logger.warning(f"Unknown log level '{level_name}', using WARNING")
        return logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
