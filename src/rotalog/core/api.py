from __future__ import annotations

"""
Module-level Logging API.

Thin functions over the process-wide LoggerRegistry, plus per-priority
helpers that capture the caller's file and line automatically.
"""

import os
import sys
from typing import Any, Optional, Tuple

from rotalog.core.logger import ExternalHandler
from rotalog.core.registry import LoggerRegistry
from rotalog.domain.config import LoggerConfig
from rotalog.domain.constants import (
    DEFAULT_HEADER,
    DEFAULT_MASKING,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_OUTPUT_MODE,
    DEFAULT_PRIORITY,
    HeaderField,
    MaskingMode,
    OutputMode,
    Priority,
)

_registry = LoggerRegistry()


# -----------------------------------------------------------------------------
# LIFECYCLE API
# -----------------------------------------------------------------------------

def get_registry() -> LoggerRegistry:
    """Return the process-wide registry."""
    return _registry


def create_instance(
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
    """Create the process-wide logger. See LoggerRegistry.create."""
    return _registry.create(
        log_dir, log_name, max_file_size, max_file_count,
        output, header, threshold, masking, append,
    )


def create_instance_from_config(config: LoggerConfig) -> bool:
    return _registry.create_from_config(config)


def destroy_instance() -> bool:
    return _registry.destroy()


def is_created() -> bool:
    return _registry.is_created()


def set_external_handler(handler: Optional[ExternalHandler]) -> bool:
    return _registry.set_external_handler(handler)


def emit(file: str, line: int, priority: Priority, template: str, *args: Any) -> bool:
    """Sole entry point for explicit call sites."""
    return _registry.emit(file, line, priority, template, *args)


# -----------------------------------------------------------------------------
# CALL-SITE HELPERS
# -----------------------------------------------------------------------------

def _caller_site(depth: int = 2) -> Tuple[str, int]:
    """Resolve the file basename and line of the frame 'depth' levels up."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return "?", 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


def _log(priority: Priority, template: str, args: Tuple[Any, ...]) -> bool:
    if not _registry.is_created():
        return False
    file, line = _caller_site(3)
    return _registry.emit(file, line, priority, template, *args)


def emergency(template: str, *args: Any) -> bool:
    return _log(Priority.EMERGENCY, template, args)


def alert(template: str, *args: Any) -> bool:
    return _log(Priority.ALERT, template, args)


def critical(template: str, *args: Any) -> bool:
    return _log(Priority.CRITICAL, template, args)


def error(template: str, *args: Any) -> bool:
    return _log(Priority.ERROR, template, args)


def warning(template: str, *args: Any) -> bool:
    return _log(Priority.WARNING, template, args)


def notice(template: str, *args: Any) -> bool:
    return _log(Priority.NOTICE, template, args)


def info(template: str, *args: Any) -> bool:
    return _log(Priority.INFO, template, args)


def debug(template: str, *args: Any) -> bool:
    return _log(Priority.DEBUG, template, args)
