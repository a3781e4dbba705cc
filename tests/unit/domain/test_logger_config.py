from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies:
1. Defaults and immutability of LoggerConfig.
2. Friendly-name normalization of enum fields.
3. Non-strict correction versus strict rejection.
4. JSON loading with fallback on missing or corrupted files.
"""

import dataclasses
import json
import logging
from pathlib import Path

import pytest

from rotalog.domain.config import (
    LoggerConfig,
    get_default_config,
    load_config,
    parse_priority,
    validate_config,
)
from rotalog.domain.constants import (
    DEFAULT_HEADER,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    PRIORITY_LABELS,
    HeaderField,
    MaskingMode,
    OutputMode,
    Priority,
)
from rotalog.domain.errors import ConfigurationError


def test_logger_config_defaults_are_immutable() -> None:
    """TC-01: Verify the defaults and that the dataclass is frozen."""
    cfg = LoggerConfig()

    assert cfg.max_file_size == DEFAULT_MAX_FILE_SIZE
    assert cfg.max_file_count == DEFAULT_MAX_FILE_COUNT
    assert cfg.output == OutputMode.FILE
    assert cfg.header == DEFAULT_HEADER
    assert cfg.threshold == Priority.INFO
    assert cfg.masking == MaskingMode.COMPLETE
    assert cfg.append is True

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.append = False  # type: ignore[misc]


def test_default_mapping_validates_to_default_config() -> None:
    """TC-01: Verify the friendly default mapping round-trips to LoggerConfig()."""
    cfg, warnings = validate_config(get_default_config())

    assert warnings == []
    assert cfg == LoggerConfig()


def test_priority_labels_are_fixed_width() -> None:
    """TC-02: Verify every label is bracketed and padded to nine characters."""
    assert all(len(label) == 9 for label in PRIORITY_LABELS.values())
    assert PRIORITY_LABELS[Priority.EMERGENCY] == "[EMERG]  "
    assert PRIORITY_LABELS[Priority.NOTICE] == "[NOTICE] "


def test_validate_config_friendly_names() -> None:
    """TC-03: Verify names are mapped onto the enum values."""
    cfg, warnings = validate_config({
        "log_dir": " /var/log/app ",
        "log_name": "app",
        "output": "both",
        "header": ["date", "source", "priority"],
        "threshold": "warn",
        "masking": "COMPLETE",
        "append": False,
    })

    assert warnings == []
    assert cfg.log_dir == "/var/log/app"
    assert cfg.output == OutputMode.BOTH
    assert cfg.header == HeaderField.DATE | HeaderField.MARK | HeaderField.PRIORITY
    assert cfg.threshold == Priority.WARNING
    assert cfg.append is False


def test_validate_config_output_list_and_header_all() -> None:
    """TC-03: Verify list destinations combine and 'all' enables every field."""
    cfg, _ = validate_config({"output": ["console", "file"], "header": "all"})

    assert cfg.output == OutputMode.BOTH
    assert cfg.header == HeaderField.ALL


def test_validate_config_corrects_invalid_values() -> None:
    """TC-04: Verify non-strict mode falls back to defaults with warnings."""
    cfg, warnings = validate_config({
        "max_file_size": -5,
        "max_file_count": "ten",
        "threshold": "loud",
        "masking": "partial",
        "append": "yes",
        "bogus": 1,
    })

    assert cfg.max_file_size == DEFAULT_MAX_FILE_SIZE
    assert cfg.max_file_count == DEFAULT_MAX_FILE_COUNT
    assert cfg.threshold == Priority.INFO
    assert cfg.masking == MaskingMode.COMPLETE
    assert cfg.append is True
    assert len(warnings) == 6
    assert any("bogus" in w for w in warnings)


def test_validate_config_strict_raises() -> None:
    """TC-04: Verify strict mode rejects the first invalid value."""
    with pytest.raises(ConfigurationError):
        validate_config({"threshold": "loud"}, strict=True)

    with pytest.raises(ConfigurationError):
        validate_config(["not", "a", "mapping"], strict=True)


def test_validate_config_strict_rejects_unknown_keys() -> None:
    """TC-04: Verify strict mode treats an unknown key as invalid."""
    with pytest.raises(ConfigurationError, match="bogus"):
        validate_config({"log_name": "app", "bogus": 1}, strict=True)


def test_validate_config_non_mapping_returns_defaults() -> None:
    """TC-04: Verify a non-mapping input degrades to defaults."""
    cfg, warnings = validate_config(None)

    assert cfg == LoggerConfig()
    assert len(warnings) == 1


def test_parse_priority_variants() -> None:
    """TC-05: Verify ints, enums and names are accepted."""
    assert parse_priority(3) == Priority.ERROR
    assert parse_priority(Priority.DEBUG) == Priority.DEBUG
    assert parse_priority("Emerg") == Priority.EMERGENCY
    assert parse_priority(None) == Priority.INFO
    assert parse_priority(42) == Priority.INFO


def test_load_config_from_json(tmp_path: Path) -> None:
    """TC-06: Verify a JSON file is loaded and validated."""
    path = tmp_path / "rotalog.json"
    path.write_text(json.dumps({
        "log_dir": str(tmp_path / "logs"),
        "log_name": "svc",
        "max_file_size": 2048,
        "threshold": "debug",
    }), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg.log_name == "svc"
    assert cfg.max_file_size == 2048
    assert cfg.threshold == Priority.DEBUG


def test_load_config_missing_or_corrupted(tmp_path: Path, caplog) -> None:
    """TC-06: Verify missing and unparsable files fall back to defaults."""
    with caplog.at_level(logging.WARNING, logger="rotalog"):
        assert load_config(str(tmp_path / "missing.json")) == LoggerConfig()
    assert "Config file not found" in caplog.text

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_config(str(broken)) == LoggerConfig()
