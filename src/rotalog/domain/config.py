from __future__ import annotations

"""
Logger Configuration Domain.

Defines the immutable configuration of a logger instance and the
validation layer that turns plain mappings (JSON files, application
settings) into it. Friendly names are accepted for enum fields, e.g.
'threshold': 'warning' or 'header': ['date', 'priority'].
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from rotalog.domain.constants import (
    DEFAULT_HEADER,
    DEFAULT_MASKING,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_OUTPUT_MODE,
    DEFAULT_PRIORITY,
    HEADER_NAMES,
    MAX_LOG_ENTRY_SIZE,
    OUTPUT_NAMES,
    PRIORITY_NAMES,
    HeaderField,
    MaskingMode,
    OutputMode,
    Priority,
)
from rotalog.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable logger specification.

    Attributes:
        log_dir: Directory receiving the rotated files.
        log_name: Base name of the rotated files.
        max_file_size: Rotation threshold in bytes.
        max_file_count: Number of files in the rotation ring.
        output: Enabled destinations (console, file or both).
        header: Header fields prefixed to each record.
        threshold: Least severe priority still written.
        masking: Redaction mode (complete output only).
        append: Resume the previous session's last file on start.
        max_entry_size: Hard cap on one encoded record.
    """
    log_dir: str = ""
    log_name: str = ""
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_file_count: int = DEFAULT_MAX_FILE_COUNT
    output: OutputMode = DEFAULT_OUTPUT_MODE
    header: HeaderField = DEFAULT_HEADER
    threshold: Priority = DEFAULT_PRIORITY
    masking: MaskingMode = DEFAULT_MASKING
    append: bool = True
    max_entry_size: int = MAX_LOG_ENTRY_SIZE


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default configuration as a plain mapping.

    Returns:
        Dict[str, Any]: Default values using friendly names.
    """
    return {
        "log_dir": "",
        "log_name": "",
        "max_file_size": DEFAULT_MAX_FILE_SIZE,
        "max_file_count": DEFAULT_MAX_FILE_COUNT,
        "output": "file",
        "header": ["date", "time", "mark", "priority"],
        "threshold": "info",
        "masking": DEFAULT_MASKING.value,
        "append": True,
        "max_entry_size": MAX_LOG_ENTRY_SIZE,
    }


# -----------------------------------------------------------------------------
# VALIDATION API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[LoggerConfig, List[str]]:
    """
    Validate and normalize a configuration mapping.

    strict=False corrects bad values to their defaults and reports each
    correction as a warning. strict=True raises on the first bad value.

    Args:
        config: Mapping of configuration keys.
        strict: Raise instead of correcting.

    Returns:
        Tuple[LoggerConfig, List[str]]: Normalized config and warnings.

    Raises:
        ConfigurationError: In strict mode, on any invalid value.
    """
    warnings: List[str] = []
    defaults = LoggerConfig()

    if not isinstance(config, Mapping):
        msg = f"Invalid config: expected a mapping, got {type(config).__name__}."
        if strict:
            raise ConfigurationError(msg)
        warnings.append(msg + " Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    unknown = sorted(set(config) - set(get_default_config()))
    for key in unknown:
        msg = f"Unknown config key: '{key}'."
        if strict:
            raise ConfigurationError(msg)
        warnings.append(msg + " Ignored.")

    cfg = LoggerConfig(
        log_dir=_as_str(config.get("log_dir"), defaults.log_dir, "log_dir", warnings, strict),
        log_name=_as_str(config.get("log_name"), defaults.log_name, "log_name", warnings, strict),
        max_file_size=_as_positive_int(
            config.get("max_file_size"), defaults.max_file_size, "max_file_size", warnings, strict
        ),
        max_file_count=_as_positive_int(
            config.get("max_file_count"), defaults.max_file_count, "max_file_count", warnings, strict
        ),
        output=_as_output(config.get("output"), defaults.output, warnings, strict),
        header=_as_header(config.get("header"), defaults.header, warnings, strict),
        threshold=parse_priority(config.get("threshold"), defaults.threshold, warnings, strict),
        masking=_as_masking(config.get("masking"), defaults.masking, warnings, strict),
        append=_as_bool(config.get("append"), defaults.append, "append", warnings, strict),
        max_entry_size=_as_positive_int(
            config.get("max_entry_size"), defaults.max_entry_size, "max_entry_size", warnings, strict
        ),
    )

    for w in warnings:
        logger.debug(w)
    return cfg, warnings


def load_config(path: str) -> LoggerConfig:
    """
    Load a logger configuration from a JSON file.

    Missing or corrupted files fall back to defaults. Values are validated
    non-strictly.

    Args:
        path: Path to the JSON document.

    Returns:
        LoggerConfig: The loaded configuration.
    """
    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Returning defaults.")
        return LoggerConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return LoggerConfig()

    cfg, warnings = validate_config(data)
    if warnings:
        logger.warning(f"Config '{path}' loaded with {len(warnings)} correction(s).")
    return cfg


def parse_priority(
        value: Any,
        default: Priority = DEFAULT_PRIORITY,
        warnings: Optional[List[str]] = None,
        strict: bool = False,
) -> Priority:
    """
    Resolve a priority from a Priority, an int or a name such as 'warn'.
    """
    if value is None:
        return default
    try:
        if isinstance(value, str):
            return PRIORITY_NAMES[value.strip().upper()]
        if isinstance(value, bool):
            raise ValueError(value)
        return Priority(int(value))
    except (KeyError, ValueError, TypeError):
        return _reject(f"Invalid threshold {value!r}.", default, warnings, strict)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _reject(msg: str, default: Any, warnings: Optional[List[str]], strict: bool) -> Any:
    if strict:
        raise ConfigurationError(msg)
    if warnings is not None:
        warnings.append(f"{msg} Using default: {default!r}.")
    return default


def _as_str(value: Any, default: str, key: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip()
    return _reject(f"Invalid '{key}': expected str, got {type(value).__name__}.", default, warnings, strict)


def _as_bool(value: Any, default: bool, key: str, warnings: List[str], strict: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return _reject(f"Invalid '{key}': expected bool, got {type(value).__name__}.", default, warnings, strict)


def _as_positive_int(value: Any, default: int, key: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return _reject(f"Invalid '{key}': expected a positive int, got {value!r}.", default, warnings, strict)
    return value


def _as_output(value: Any, default: OutputMode, warnings: List[str], strict: bool) -> OutputMode:
    if value is None:
        return default
    if isinstance(value, OutputMode):
        return value
    if isinstance(value, str) and value.strip().upper() in OUTPUT_NAMES:
        return OUTPUT_NAMES[value.strip().upper()]
    if isinstance(value, (list, tuple)):
        mode = OutputMode.NONE
        for item in value:
            name = str(item).strip().upper()
            if name not in OUTPUT_NAMES:
                return _reject(f"Invalid output destination {item!r}.", default, warnings, strict)
            mode |= OUTPUT_NAMES[name]
        return mode
    return _reject(f"Invalid output {value!r}.", default, warnings, strict)


def _as_header(value: Any, default: HeaderField, warnings: List[str], strict: bool) -> HeaderField:
    if value is None:
        return default
    if isinstance(value, HeaderField):
        return value
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple)):
        mask = HeaderField.NONE
        for item in value:
            name = str(item).strip().upper()
            if name == "ALL":
                mask |= HeaderField.ALL
            elif name in HEADER_NAMES:
                mask |= HEADER_NAMES[name]
            else:
                return _reject(f"Invalid header field {item!r}.", default, warnings, strict)
        return mask
    return _reject(f"Invalid header {value!r}.", default, warnings, strict)


def _as_masking(value: Any, default: MaskingMode, warnings: List[str], strict: bool) -> MaskingMode:
    if value is None:
        return default
    if isinstance(value, MaskingMode):
        return value
    try:
        return MaskingMode(str(value).strip().lower())
    except ValueError:
        return _reject(f"Invalid masking mode {value!r}.", default, warnings, strict)
