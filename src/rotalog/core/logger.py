from __future__ import annotations

"""
Logger Facade.

Filters records by priority, formats them according to the header mask and
dispatches them to the console and/or the rotating file writer. An external
handler, when installed, replaces formatting and rotation entirely.
"""

import logging
import sys
from typing import Any, Callable, Optional

from rotalog.core.formatter import RECORD_ENCODING, format_record
from rotalog.core.writer import RotatingFileWriter
from rotalog.domain.config import LoggerConfig
from rotalog.domain.constants import OutputMode, Priority
from rotalog.domain.errors import RecordCapacityError

logger = logging.getLogger(__name__)

# (source_file, line, context, priority, template, args) -> success
ExternalHandler = Callable[[str, int, Any, Priority, str, tuple], bool]


class Logger:
    """
    Priority-filtered, header-annotated log formatter.

    Instances are usually owned by a LoggerRegistry, but can be created and
    passed around explicitly.
    """

    def __init__(self) -> None:
        self._config = LoggerConfig()
        self._writer: Optional[RotatingFileWriter] = RotatingFileWriter()
        self._ext_handler: Optional[ExternalHandler] = None

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def writer(self) -> Optional[RotatingFileWriter]:
        return self._writer

    @property
    def external_handler(self) -> Optional[ExternalHandler]:
        return self._ext_handler

    def init(self, config: LoggerConfig) -> bool:
        """
        Store the configuration and initialize the rotating writer.

        Args:
            config: Logger configuration.

        Returns:
            bool: The writer initialization result.
        """
        self._config = config
        if self._writer is None:
            self._writer = RotatingFileWriter()
        return self._writer.init(
            config.log_dir,
            config.log_name,
            config.max_file_size,
            config.max_file_count,
            config.append,
        )

    def set_handler(self, handler: Optional[ExternalHandler]) -> None:
        self._ext_handler = handler

    def close(self) -> None:
        """Release the writer. Later emits only reach the console."""
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    def emit(self, file: str, line: int, priority: Priority, template: str, *args: Any) -> bool:
        """
        Format and dispatch one record.

        Records less severe than the threshold are dropped and reported as
        success. Oversized records and template mismatches are reported as
        failure and never truncated.

        Args:
            file: Source file of the call site.
            line: Source line of the call site.
            priority: Record priority.
            template: printf-style message template.
            *args: Template arguments.

        Returns:
            bool: True if every enabled destination accepted the record.
        """
        handler = self._ext_handler
        if handler is not None:
            try:
                return bool(handler(file, line, None, priority, template, args))
            except Exception as e:
                logger.error(f"External log handler failed: {e}")
                return False

        try:
            priority = Priority(priority)
        except (TypeError, ValueError):
            logger.error(f"Log record rejected at {file}:{line}: unknown priority {priority!r}")
            return False

        if priority > self._config.threshold:
            return True

        try:
            entry = format_record(
                self._config.header,
                file,
                line,
                priority,
                template,
                args,
                self._config.max_entry_size,
            )
        except RecordCapacityError as e:
            logger.error(f"Log record rejected at {file}:{line}: {e}")
            return False
        except (TypeError, ValueError) as e:
            logger.error(f"Cannot expand log template {template!r} at {file}:{line}: {e}")
            return False

        status = True
        if self._config.output & OutputMode.CONSOLE:
            try:
                sys.stdout.write(entry.decode(RECORD_ENCODING))
            except (AttributeError, OSError, ValueError) as e:
                # sys.stdout is None under pythonw
                logger.warning(f"Console log output failed: {e}")
                status = False

        writer = self._writer
        if self._config.output & OutputMode.FILE and writer is not None:
            status = writer.dump_log(entry) and status

        return status
