"""Validation error kinds for goals and daily logs."""

from enum import StrEnum


class GoalError(StrEnum):
    """Reasons a goal submission is rejected."""

    NON_ZERO_TARGET = "non_zero_target"
    WINDOW_RANGE = "window_range"
    START_IN_PAST = "start_in_past"


class LogError(StrEnum):
    """Reasons a daily log submission is rejected."""

    NEGATIVE_VALUE = "negative_value"
    UNREALISTIC = "unrealistic"
    OUT_OF_WINDOW = "out_of_window"
    DUPLICATE_DATE = "duplicate_date"
    NOT_FOUND = "not_found"


class PersistenceError(RuntimeError):
    """Raised when the storage backend does not confirm a write."""
