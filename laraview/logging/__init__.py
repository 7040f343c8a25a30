"""
Logging Package
Structured logging for the view layer

Provides a drop-in replacement for logging.getLogger that keeps every
framework logger under the 'laraview' namespace.
"""
from laraview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (the framework logger, 'laraview')
    - Module-based names (containing '.') like 'laraview.view.factory'

    Any other bare name is folded into the framework logger, so handlers
    attached by LoggingServiceProvider see every record.

    Example:
        from laraview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Composer registered", extra={'view': 'home.html'})
    """
    from laraview.defaults import DEFAULT_LOGGER_NAME

    if name is None or '.' not in name:
        name = DEFAULT_LOGGER_NAME

    return logging.getLogger(name)
