from __future__ import annotations

from .config import DiagnosticsConfig, level_to_priority
from .core import (
    configure_diagnostics,
    get_logger,
    reset_diagnostics,
)
from .handlers import RotalogHandler

__all__ = [
    "DiagnosticsConfig",
    "RotalogHandler",
    "configure_diagnostics",
    "get_logger",
    "level_to_priority",
    "reset_diagnostics",
]
