from __future__ import annotations

"""
Domain Constants and Enumerations.

Provides the severity scale, header field mask, output destinations and the
fixed-width priority label table shared by the formatter, the writer and
the configuration layer.
"""

from enum import Enum, IntEnum, IntFlag
from typing import Dict

# -----------------------------------------------------------------------------
# SIZE LIMITS & DEFAULTS
# -----------------------------------------------------------------------------

MAX_LOG_ENTRY_SIZE = 4096
MAX_PRIORITY_NAME_LENGTH = 9

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_MAX_FILE_COUNT = 10

LOG_FILE_EXTENSION = ".log"


# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class Priority(IntEnum):
    """
    Severity scale. Lower numeric value means higher severity.

    A configured threshold admits every priority numerically <= itself.
    """
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class HeaderField(IntFlag):
    """Optional fields prefixed to every record."""
    NONE = 0
    DATE = 1
    TIME = 2
    MARK = 4
    THREAD = 8
    PRIORITY = 16

    ALL = DATE | TIME | MARK | THREAD | PRIORITY


class OutputMode(IntFlag):
    """Record destinations. Console and file are independent switches."""
    NONE = 0
    CONSOLE = 1
    FILE = 2

    BOTH = CONSOLE | FILE


class MaskingMode(Enum):
    """Redaction mode. Only complete output is supported."""
    COMPLETE = "complete"


DEFAULT_OUTPUT_MODE = OutputMode.FILE
DEFAULT_HEADER = HeaderField.DATE | HeaderField.TIME | HeaderField.MARK | HeaderField.PRIORITY
DEFAULT_PRIORITY = Priority.INFO
DEFAULT_MASKING = MaskingMode.COMPLETE


# -----------------------------------------------------------------------------
# PRIORITY LABELS
# -----------------------------------------------------------------------------

_PRIORITY_SHORT_NAMES: Dict[Priority, str] = {
    Priority.EMERGENCY: "[EMERG]",
    Priority.ALERT: "[ALERT]",
    Priority.CRITICAL: "[CRITIC]",
    Priority.ERROR: "[ERROR]",
    Priority.WARNING: "[WARN]",
    Priority.NOTICE: "[NOTICE]",
    Priority.INFO: "[INFO]",
    Priority.DEBUG: "[DEBUG]",
}

# Space-padded to a fixed width so message columns line up
PRIORITY_LABELS: Dict[Priority, str] = {
    prio: name.ljust(MAX_PRIORITY_NAME_LENGTH)
    for prio, name in _PRIORITY_SHORT_NAMES.items()
}

# Friendly names accepted by the configuration layer
PRIORITY_NAMES: Dict[str, Priority] = {
    "EMERGENCY": Priority.EMERGENCY,
    "EMERG": Priority.EMERGENCY,
    "ALERT": Priority.ALERT,
    "CRITICAL": Priority.CRITICAL,
    "CRITIC": Priority.CRITICAL,
    "ERROR": Priority.ERROR,
    "WARNING": Priority.WARNING,
    "WARN": Priority.WARNING,
    "NOTICE": Priority.NOTICE,
    "INFO": Priority.INFO,
    "DEBUG": Priority.DEBUG,
}

HEADER_NAMES: Dict[str, HeaderField] = {
    "DATE": HeaderField.DATE,
    "TIME": HeaderField.TIME,
    "MARK": HeaderField.MARK,
    "SOURCE": HeaderField.MARK,
    "THREAD": HeaderField.THREAD,
    "PRIORITY": HeaderField.PRIORITY,
}

OUTPUT_NAMES: Dict[str, OutputMode] = {
    "NONE": OutputMode.NONE,
    "CONSOLE": OutputMode.CONSOLE,
    "FILE": OutputMode.FILE,
    "BOTH": OutputMode.BOTH,
}
