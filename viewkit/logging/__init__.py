"""
Logging Package
Structured logging with security features
"""
from viewkit.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Configured channels in 'app.LOGGING_CHANNELS' (e.g., 'application', 'error')
    - Module-based names (containing '.') like 'viewkit.error.exception_renderer'

    Example:
        from viewkit.logging import getLogger
        logger = getLogger(__name__)
        logger.warning("Fallback render", extra={'template': 'error500'})
    """
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name:
        from viewkit.defaults import DEFAULT_LOGGING_CHANNELS
        from viewkit.support import Config

        allowed_names = Config.get('app.LOGGING_CHANNELS', DEFAULT_LOGGING_CHANNELS)

        if name not in allowed_names:
            # Force arbitrary names to use root logger
            name = None

    return logging.getLogger(name)
