from __future__ import annotations

"""
Process-wide Logger Registry.

Holds at most one live Logger with an explicit create/destroy lifecycle.
Emitting before creation or after destruction is a cheap no-op that
reports failure. Lifecycle changes and instance lookup are serialized by a
re-entrant lock; formatting and file I/O run outside of it.
"""

import logging
import threading
from typing import Any, Optional

from rotalog.core.logger import ExternalHandler, Logger
from rotalog.domain.config import LoggerConfig
from rotalog.domain.constants import (
    DEFAULT_HEADER,
    DEFAULT_MASKING,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_OUTPUT_MODE,
    DEFAULT_PRIORITY,
    MAX_LOG_ENTRY_SIZE,
    HeaderField,
    MaskingMode,
    OutputMode,
    Priority,
)

logger = logging.getLogger(__name__)


class LoggerRegistry:
    """Owner of the single shared Logger instance."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._instance: Optional[Logger] = None

    @property
    def instance(self) -> Optional[Logger]:
        with self._lock:
            return self._instance

    def is_created(self) -> bool:
        with self._lock:
            return self._instance is not None

    def create(
            self,
            log_dir: str,
            log_name: str,
            max_file_size: int = DEFAULT_MAX_FILE_SIZE,
            max_file_count: int = DEFAULT_MAX_FILE_COUNT,
            output: OutputMode = DEFAULT_OUTPUT_MODE,
            header: HeaderField = DEFAULT_HEADER,
            threshold: Priority = DEFAULT_PRIORITY,
            masking: MaskingMode = DEFAULT_MASKING,
            append: bool = True,
    ) -> bool:
        """
        Create and initialize the shared logger.

        A second call while an instance is live succeeds without
        reconfiguring it. An empty directory or name, or a value outside
        its enumeration, fails fast.

        Returns:
            bool: True if an instance is live afterwards.
        """
        try:
            config = LoggerConfig(
                log_dir=log_dir or "",
                log_name=log_name or "",
                max_file_size=max_file_size,
                max_file_count=max_file_count,
                output=OutputMode(output),
                header=HeaderField(header),
                threshold=Priority(threshold),
                masking=MaskingMode(masking),
                append=append,
                max_entry_size=MAX_LOG_ENTRY_SIZE,
            )
        except (TypeError, ValueError) as e:
            logger.error(f"Logger creation refused: {e}")
            return False
        return self.create_from_config(config)

    def create_from_config(self, config: LoggerConfig) -> bool:
        """Create the shared logger from a prepared configuration."""
        with self._lock:
            if self._instance is not None:
                return True
            if not config.log_dir or not config.log_name:
                logger.error("Logger creation refused: log directory and name are required")
                return False

            instance = Logger()
            if not instance.init(config):
                instance.close()
                logger.error(f"Logger initialization failed for {config.log_dir}/{config.log_name}")
                return False

            self._instance = instance
            logger.debug(f"Logger created: {config.log_dir}/{config.log_name}")
            return True

    def destroy(self) -> bool:
        """Release the shared logger. Succeeds when none exists."""
        with self._lock:
            if self._instance is None:
                return True
            self._instance.close()
            self._instance = None
            logger.debug("Logger destroyed")
            return True

    def set_external_handler(self, handler: Optional[ExternalHandler]) -> bool:
        """
        Install a handler that bypasses formatting and rotation.

        Ignored (returns False) when no instance exists. None removes the
        installed handler.
        """
        with self._lock:
            if self._instance is None:
                logger.warning("External log handler ignored: logger not created")
                return False
            self._instance.set_handler(handler)
            return True

    def emit(self, file: str, line: int, priority: Priority, template: str, *args: Any) -> bool:
        """Dispatch a record to the live logger, or fail if there is none."""
        with self._lock:
            instance = self._instance
        if instance is None:
            return False
        # A concurrent destroy() closes the writer; dump_log then fails cleanly
        return instance.emit(file, line, priority, template, *args)
