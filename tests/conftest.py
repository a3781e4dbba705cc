from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the process-wide logger registry between tests.
3. Shared fixtures for log directories and fresh registries.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rotalog.core.api import destroy_instance  # noqa: E402
from rotalog.core.registry import LoggerRegistry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_global_registry() -> Iterator[None]:
    """Ensure no process-wide logger leaks across tests."""
    destroy_instance()
    yield
    destroy_instance()


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Return a not-yet-existing directory for rotated log files."""
    return tmp_path / "logs"


@pytest.fixture
def registry() -> Iterator[LoggerRegistry]:
    """Provide a private registry, destroyed after the test."""
    reg = LoggerRegistry()
    yield reg
    reg.destroy()
