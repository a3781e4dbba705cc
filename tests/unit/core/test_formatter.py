from __future__ import annotations

"""
Unit tests for Record Formatting.

Verifies:
1. Header field layout and ordering under different masks.
2. printf-style message expansion.
3. The hard capacity bound on a single record.
"""

import re
import threading
from datetime import datetime

import pytest

from rotalog.core.formatter import build_header, expand_message, format_record
from rotalog.domain.constants import MAX_LOG_ENTRY_SIZE, HeaderField, Priority
from rotalog.domain.errors import RecordCapacityError

FIXED_NOW = datetime(2024, 3, 7, 9, 5, 2, 42)


# -----------------------------------------------------------------------------
# HEADER TESTS
# -----------------------------------------------------------------------------

def test_full_header_layout() -> None:
    """TC-01: Verify date, time, mark and priority appear in order."""
    header = HeaderField.DATE | HeaderField.TIME | HeaderField.MARK | HeaderField.PRIORITY
    text = build_header(header, "main.py", 7, Priority.ERROR, FIXED_NOW)

    assert text == "2024-03-07 09:05:02:000042 main.py:007 [ERROR]  "


def test_empty_header_mask() -> None:
    """TC-01: Verify no header text is produced when every field is off."""
    assert build_header(HeaderField.NONE, "main.py", 1, Priority.INFO) == ""


def test_priority_only_header() -> None:
    """TC-01: Verify the label is fixed-width and space-padded."""
    assert build_header(HeaderField.PRIORITY, "x.py", 1, Priority.CRITICAL) == "[CRITIC] "
    assert build_header(HeaderField.PRIORITY, "x.py", 1, Priority.WARNING) == "[WARN]   "


def test_mark_keeps_long_line_numbers() -> None:
    """TC-01: Verify line numbers wider than three digits are not cut."""
    assert build_header(HeaderField.MARK, "svc.py", 12345, Priority.INFO) == "svc.py:12345 "


def test_thread_field_uses_native_thread_id() -> None:
    """TC-02: Verify the thread marker carries the zero-padded native id."""
    text = build_header(HeaderField.THREAD, "x.py", 1, Priority.INFO)

    assert re.fullmatch(r"\d{5,} ", text)
    assert int(text) == threading.get_native_id()


# -----------------------------------------------------------------------------
# MESSAGE TESTS
# -----------------------------------------------------------------------------

def test_expand_message_with_arguments() -> None:
    """TC-03: Verify printf-style expansion."""
    assert expand_message("disk %s at %d%%", ("sda1", 93)) == "disk sda1 at 93%"


def test_expand_message_without_arguments_is_verbatim() -> None:
    """TC-03: Verify a bare template is not interpreted."""
    assert expand_message("100% done", ()) == "100% done"


def test_expand_message_mismatch_raises() -> None:
    """TC-03: Verify template/argument mismatches surface as TypeError."""
    with pytest.raises(TypeError):
        expand_message("%d and %d", (1,))


# -----------------------------------------------------------------------------
# RECORD TESTS
# -----------------------------------------------------------------------------

def test_format_record_is_newline_terminated_bytes() -> None:
    """TC-04: Verify the encoded record ends with exactly one newline."""
    entry = format_record(HeaderField.PRIORITY, "a.py", 1, Priority.INFO, "hello %s", ("world",))

    assert entry == b"[INFO]   hello world\n"


def test_format_record_at_exact_capacity() -> None:
    """TC-05: Verify a record of exactly the maximum size is accepted."""
    msg = "x" * (MAX_LOG_ENTRY_SIZE - 1)
    entry = format_record(HeaderField.NONE, "a.py", 1, Priority.INFO, msg)

    assert len(entry) == MAX_LOG_ENTRY_SIZE


def test_format_record_over_capacity_is_rejected() -> None:
    """TC-05: Verify oversized records raise instead of being truncated."""
    msg = "x" * MAX_LOG_ENTRY_SIZE

    with pytest.raises(RecordCapacityError) as exc_info:
        format_record(HeaderField.NONE, "a.py", 1, Priority.INFO, msg)

    assert exc_info.value.size == MAX_LOG_ENTRY_SIZE + 1
    assert exc_info.value.limit == MAX_LOG_ENTRY_SIZE


def test_format_record_capacity_counts_encoded_bytes() -> None:
    """TC-05: Verify the bound applies to UTF-8 bytes, not characters."""
    msg = "é" * 10  # 20 bytes once encoded

    with pytest.raises(RecordCapacityError):
        format_record(HeaderField.NONE, "a.py", 1, Priority.INFO, msg, max_entry_size=15)
