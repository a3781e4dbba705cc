from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides existence and size queries plus recursive directory creation for
the rotating writer. Paths are normalized to forward-slash form so that
Windows-style input ('C:\\logs\\app') walks the same way as POSIX input.
"""

import logging
import os

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH NORMALIZATION API
# -----------------------------------------------------------------------------

def normalize_dir_path(path: str) -> str:
    """
    Convert a directory path into the canonical 'X/Y/Z/' form.

    Backslashes become forward slashes and a trailing separator is
    appended when missing. An empty path is returned unchanged.

    Args:
        path: Raw directory path.

    Returns:
        str: Normalized directory path.
    """
    if not path:
        return path
    normalized = path.replace("\\", "/")
    if not normalized.endswith("/"):
        normalized += "/"
    return normalized


# -----------------------------------------------------------------------------
# FILESYSTEM QUERY API
# -----------------------------------------------------------------------------

def is_directory(path: str) -> bool:
    """Return True iff the path exists and is a directory."""
    if not path:
        return False
    return os.path.isdir(path)


def file_exists(path: str) -> bool:
    """Return True iff the path names an existing regular file."""
    if not path:
        return False
    return os.path.isfile(path)


def file_size(path: str) -> int:
    """
    Return the size of a file in bytes.

    A file that cannot be inspected reports 0, the same as an empty file.
    """
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


# -----------------------------------------------------------------------------
# DIRECTORY CREATION API
# -----------------------------------------------------------------------------

def create_recursion_dir(path: str) -> bool:
    """
    Create every missing directory along a path, one component at a time.

    Walks the normalized path from its root and creates each intermediate
    directory that does not exist yet. Stops at the first failure, keeping
    whatever was already created. Running it again on an existing path is
    a successful no-op.

    Args:
        path: Target directory path.

    Returns:
        bool: True if the whole hierarchy exists afterwards.
    """
    dirs = normalize_dir_path(path)
    if not dirs:
        return True

    pos = dirs.find("/")
    while pos != -1:
        current = dirs[:pos]
        if current and not is_directory(current):
            try:
                os.mkdir(current)
            except FileExistsError:
                # Another thread or process created it in between
                if not is_directory(current):
                    logger.warning(f"Path component exists and is not a directory: {current}")
                    return False
            except OSError as e:
                logger.warning(f"Failed to create directory '{current}': {e}")
                return False
        pos = dirs.find("/", pos + 1)

    return True
