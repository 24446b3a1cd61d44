from __future__ import annotations

from .config import LoggingConfig
from .core import configure_logging, get_logger, _QUEUE_LISTENER_ATTR, _CONFIGURED_FLAG_ATTR
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
]
