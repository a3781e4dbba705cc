from __future__ import annotations

"""
Diagnostics Configuration Models.

Defines the settings for the package's own diagnostic output (directory
creation failures, rotation errors, rejected records) and the mapping from
standard library levels onto the record priority scale.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from rotalog.domain.constants import Priority

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Native logging level -> record priority, checked from most severe down
_PRIORITY_BY_LEVEL = (
    (logging.CRITICAL, Priority.CRITICAL),
    (logging.ERROR, Priority.ERROR),
    (logging.WARNING, Priority.WARNING),
    (logging.INFO, Priority.INFO),
)


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Settings for the package diagnostics logger.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        fmt: Structural format for diagnostic lines.
    """
    level: str = "WARNING"
    console: bool = True
    fmt: str = "rotalog | %(levelname)s | %(name)s | %(message)s"


def level_to_priority(level: int) -> Priority:
    """Map a native logging level onto the closest record priority."""
    for threshold, priority in _PRIORITY_BY_LEVEL:
        if level >= threshold:
            return priority
    return Priority.DEBUG
