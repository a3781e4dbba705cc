from __future__ import annotations

"""
Rotating File Writer.

Owns one open log file plus the rotation state around it (byte count and
rotation index). Files are named '{dir}/{name}-{index}.log' and reused as a
ring: once the last index is full, writing wraps to index 0 and truncates
it. All mutation happens under a single lock so concurrent writers never
interleave partial records or lose a rotation.
"""

import logging
import threading
from typing import BinaryIO, Optional

from rotalog.domain.constants import (
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    LOG_FILE_EXTENSION,
)
from rotalog.domain.errors import WriterError
from rotalog.infra.fs import (
    create_recursion_dir,
    file_exists,
    file_size,
    is_directory,
    normalize_dir_path,
)

logger = logging.getLogger(__name__)


class RotatingFileWriter:
    """
    Size-bounded, count-bounded rotating log file.

    A write that pushes the active file past 'max_file_size' still lands in
    full; the rotation happens on the following write. The active file can
    therefore exceed the limit by at most one record.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._file: Optional[BinaryIO] = None
        self._closed = True

        self._log_dir = ""
        self._log_name = ""
        self._max_file_size = DEFAULT_MAX_FILE_SIZE
        self._max_file_count = DEFAULT_MAX_FILE_COUNT
        self._append = True

        self._cur_size = 0
        self._cur_index = 0

    # -------------------------------------------------------------------------
    # PROPERTIES
    # -------------------------------------------------------------------------

    @property
    def current_path(self) -> str:
        return self._make_path(self._cur_index)

    @property
    def current_index(self) -> int:
        return self._cur_index

    @property
    def current_size(self) -> int:
        return self._cur_size

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    @property
    def max_file_count(self) -> int:
        return self._max_file_count

    @property
    def is_open(self) -> bool:
        return self._file is not None

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def init(
            self,
            log_dir: str,
            log_name: str,
            max_file_size: int = DEFAULT_MAX_FILE_SIZE,
            max_file_count: int = DEFAULT_MAX_FILE_COUNT,
            append: bool = True,
    ) -> bool:
        """
        Resolve the active rotation slot and open it.

        In append mode the writer resumes in the last existing file of the
        ring, seeding its byte count from the file size. When every slot
        already exists, it starts over at index 0 with an emptied file.
        Without append it always truncates index 0.

        Args:
            log_dir: Directory holding the rotated files. Created if missing.
            log_name: Base file name (without index or extension).
            max_file_size: Rotation threshold in bytes. Non-positive means default.
            max_file_count: Number of slots in the ring. Non-positive means default.
            append: Resume the previous session instead of truncating.

        Returns:
            bool: True if the active file is open and ready.
        """
        with self._lock:
            self._closed = True
            self._close_locked()

            self._log_dir = normalize_dir_path(log_dir)
            self._log_name = log_name
            self._max_file_size = max_file_size if max_file_size > 0 else DEFAULT_MAX_FILE_SIZE
            self._max_file_count = max_file_count if max_file_count > 0 else DEFAULT_MAX_FILE_COUNT
            self._append = append
            self._cur_index = 0
            self._cur_size = 0

            if not is_directory(log_dir) and not create_recursion_dir(log_dir):
                logger.error(f"Cannot create log directory: {log_dir}")
                return False

            try:
                if append:
                    self._resume_last_file()
                self._file = self._open(self.current_path, append)
            except WriterError as e:
                logger.error(str(e))
                return False
            self._closed = False

            logger.debug(
                f"Writer ready at {self.current_path} "
                f"(index={self._cur_index}, size={self._cur_size})"
            )
            return True

    def close(self) -> None:
        """Close the active file. Safe to call more than once."""
        with self._lock:
            self._closed = True
            self._close_locked()

    def __enter__(self) -> "RotatingFileWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # WRITE PATH
    # -------------------------------------------------------------------------

    def dump_log(self, entry: bytes) -> bool:
        """
        Append one record, rotating first if the active file is full.

        Args:
            entry: Encoded record, newline included.

        Returns:
            bool: False if rotation or the write itself failed.
        """
        size = len(entry)
        with self._lock:
            if self._closed:
                logger.warning("Dropping log record: writer is closed")
                return False
            self._cur_size += size
            if self._cur_size > self._max_file_size:
                self._close_locked()
                self._cur_index = (self._cur_index + 1) % self._max_file_count
                try:
                    self._file = self._open(self.current_path, append=False)
                except WriterError as e:
                    logger.error(f"Rotation failed: {e}")
                    return False
                # The record about to be written counts toward the new file
                self._cur_size = size

            if self._file is None:
                logger.warning("Dropping log record: no open log file")
                return False

            try:
                self._file.write(entry)
                self._file.flush()
            except OSError as e:
                logger.error(f"Failed to write log record to {self.current_path}: {e}")
                return False

        return True

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _make_path(self, index: int) -> str:
        return f"{self._log_dir}{self._log_name}-{index}{LOG_FILE_EXTENSION}"

    def _resume_last_file(self) -> None:
        """Find the last existing slot of the ring and seed the byte count."""
        while self._cur_index < self._max_file_count:
            if not file_exists(self.current_path):
                if self._cur_index > 0:
                    self._cur_index -= 1
                self._cur_size = file_size(self.current_path)
                return
            self._cur_index += 1

        # Every slot exists: overwrite the ring starting from the first file
        self._cur_index = 0
        self._cur_size = 0
        self._open(self.current_path, append=False).close()

    @staticmethod
    def _open(path: str, append: bool) -> BinaryIO:
        try:
            return open(path, "ab" if append else "wb")
        except OSError as e:
            raise WriterError(f"Cannot open log file '{path}': {e}") from e

    def _close_locked(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as e:
            logger.warning(f"Error while closing {self.current_path}: {e}")
        finally:
            self._file = None
