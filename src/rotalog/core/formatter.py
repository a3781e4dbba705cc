from __future__ import annotations

"""
Record Formatting.

Builds one log record from the configured header mask, the call site,
the priority and the user message. Each call works on its own local
buffer, so formatting needs no locking.
"""

import threading
from datetime import datetime
from typing import Any, Optional, Tuple

from rotalog.domain.constants import (
    MAX_LOG_ENTRY_SIZE,
    PRIORITY_LABELS,
    HeaderField,
    Priority,
)
from rotalog.domain.errors import RecordCapacityError

RECORD_ENCODING = "utf-8"


def expand_message(template: str, args: Tuple[Any, ...]) -> str:
    """
    Expand a printf-style template against its arguments.

    Without arguments the template is returned verbatim, so a literal '%'
    in a plain message needs no escaping.

    Raises:
        TypeError, ValueError: If the arguments do not match the template.
    """
    if not args:
        return template
    return template % args


def build_header(
        header: HeaderField,
        file: str,
        line: int,
        priority: Priority,
        now: Optional[datetime] = None,
) -> str:
    """Concatenate the enabled header fields, each followed by a space."""
    parts = []
    if header & (HeaderField.DATE | HeaderField.TIME):
        now = now or datetime.now()

    if header & HeaderField.DATE:
        parts.append(f"{now.year:4d}-{now.month:02d}-{now.day:02d} ")
    if header & HeaderField.TIME:
        parts.append(f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}:{now.microsecond:06d} ")
    if header & HeaderField.MARK:
        parts.append(f"{file}:{line:03d} ")
    if header & HeaderField.THREAD:
        parts.append(f"{threading.get_native_id():05d} ")
    if header & HeaderField.PRIORITY:
        parts.append(PRIORITY_LABELS[priority])

    return "".join(parts)


def format_record(
        header: HeaderField,
        file: str,
        line: int,
        priority: Priority,
        template: str,
        args: Tuple[Any, ...] = (),
        max_entry_size: int = MAX_LOG_ENTRY_SIZE,
        now: Optional[datetime] = None,
) -> bytes:
    """
    Produce the encoded, newline-terminated record.

    Args:
        header: Enabled header fields.
        file: Source file of the call site.
        line: Source line of the call site.
        priority: Record priority.
        template: printf-style message template.
        args: Template arguments.
        max_entry_size: Hard cap on the encoded record, newline included.
        now: Timestamp override, mainly for tests.

    Returns:
        bytes: The encoded record.

    Raises:
        RecordCapacityError: If the record exceeds 'max_entry_size'.
        TypeError, ValueError: If the template expansion fails.
    """
    text = build_header(header, file, line, priority, now) + expand_message(template, args) + "\n"
    entry = text.encode(RECORD_ENCODING, errors="replace")
    if len(entry) > max_entry_size:
        raise RecordCapacityError(len(entry), max_entry_size)
    return entry
