from __future__ import annotations

"""
Diagnostics Logging Orchestrator.

Maintains the idempotent setup of the 'rotalog' package logger. The
package never touches the root logger; applications that want the
diagnostics on stderr call configure_diagnostics() once.
"""

import logging
import sys

from rotalog.infra.logging.config import _LEVEL_MAP, DiagnosticsConfig
from rotalog.infra.logging.handlers import _is_our_handler, _tag_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_rotalog_configured"
_PACKAGE_LOGGER: str = "rotalog"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the package diagnostics logger.

    Args:
        cfg: Diagnostics settings.
        force: If True, replace the handlers installed by a previous call.

    Returns:
        logging.Logger: The 'rotalog' logger.
    """
    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)

    already_configured = bool(getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return pkg_logger

    level_int = _parse_level(cfg.level)
    pkg_logger.setLevel(level_int)
    _remove_our_handlers(pkg_logger)

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.fmt))
        _tag_handler(sh)
        pkg_logger.addHandler(sh)

    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)
    return pkg_logger


def reset_diagnostics() -> None:
    """Detach every handler installed by configure_diagnostics()."""
    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    _remove_our_handlers(pkg_logger)
    pkg_logger.setLevel(logging.NOTSET)
    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach and close every internally-managed handler."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
