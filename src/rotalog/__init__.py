from __future__ import annotations

"""
rotalog: priority-filtered logging into size- and count-bounded rotating files.

Typical use:

    import rotalog

    rotalog.create_instance("/var/log/myapp", "myapp", threshold=rotalog.Priority.WARNING)
    rotalog.error("disk %s is %d%% full", "/dev/sda1", 93)
    rotalog.destroy_instance()
"""

from rotalog.core.api import (
    alert,
    create_instance,
    create_instance_from_config,
    critical,
    debug,
    destroy_instance,
    emergency,
    emit,
    error,
    get_registry,
    info,
    is_created,
    notice,
    set_external_handler,
    warning,
)
from rotalog.core.logger import ExternalHandler, Logger
from rotalog.core.registry import LoggerRegistry
from rotalog.core.writer import RotatingFileWriter
from rotalog.domain.config import LoggerConfig, load_config, validate_config
from rotalog.domain.constants import (
    HeaderField,
    MaskingMode,
    OutputMode,
    Priority,
)

__version__ = "1.0.0"

__all__ = [
    "ExternalHandler",
    "HeaderField",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "MaskingMode",
    "OutputMode",
    "Priority",
    "RotatingFileWriter",
    "alert",
    "create_instance",
    "create_instance_from_config",
    "critical",
    "debug",
    "destroy_instance",
    "emergency",
    "emit",
    "error",
    "get_registry",
    "info",
    "is_created",
    "load_config",
    "notice",
    "set_external_handler",
    "validate_config",
    "warning",
]
