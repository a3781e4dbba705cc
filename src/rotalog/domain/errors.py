from __future__ import annotations

"""
Internal Error Taxonomy.

These exceptions never cross the public logging boundary. They are raised
by internal helpers and converted into a failed success indicator (plus a
diagnostic message) by the facade and the registry.
"""


class RotalogError(Exception):
    """Base class for every error raised inside the package."""


class ConfigurationError(RotalogError):
    """Invalid logger configuration (empty directory, unknown priority...)."""


class WriterError(RotalogError):
    """The rotating writer could not open, rotate or write its file."""


class RecordCapacityError(RotalogError):
    """A formatted record exceeds the maximum entry size."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Log record of {size} bytes exceeds the {limit} byte limit")
        self.size = size
        self.limit = limit
