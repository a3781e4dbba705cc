from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the handler tagging used to keep diagnostics configuration
idempotent, and a bridge handler that routes standard library records into
a LoggerRegistry.
"""

import logging
import os
from typing import Optional

from rotalog.core.api import get_registry
from rotalog.core.registry import LoggerRegistry
from rotalog.infra.logging.config import level_to_priority

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotalog_handler"

# Records from this namespace never enter the bridge
_PACKAGE_LOGGER = "rotalog"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Verify if a handler was installed by this package."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# BRIDGE HANDLER
# ==============================================================================

class RotalogHandler(logging.Handler):
    """
    Route standard library log records into a LoggerRegistry.

    The record's file basename and line become the source mark and its
    level is mapped onto the priority scale. The message is passed as an
    already-expanded template, so it is written verbatim.
    """

    def __init__(self, registry: Optional[LoggerRegistry] = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        if registry is None:
            registry = get_registry()
        self._registry = registry

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _PACKAGE_LOGGER or record.name.startswith(_PACKAGE_LOGGER + "."):
            return
        try:
            message = self.format(record)
            self._registry.emit(
                os.path.basename(record.pathname),
                record.lineno,
                level_to_priority(record.levelno),
                message,
            )
        except Exception:
            self.handleError(record)
