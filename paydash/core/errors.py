"""Custom exceptions for the transaction dashboard core."""
from __future__ import annotations

from typing import Any


class PaydashError(Exception):
    """Base exception for dashboard errors"""


class DateParseError(PaydashError, ValueError):
    """A transaction date could not be interpreted as a point in time."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot parse transaction date: {value!r}")


class InvalidMonthKeyError(PaydashError, ValueError):
    """A month key is not a valid YYYY-MM string."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Invalid month key: {key!r}")


class TransactionDataError(PaydashError):
    """The transaction document could not be loaded or validated"""
