"""Custom exception hierarchy for the athlete record mapper."""

from __future__ import annotations


class RecordError(Exception):
    """Base exception for all athlete_records errors."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(RecordError):
    """A required column is absent or null."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field '{field}'", field=field)


class InvalidFieldError(RecordError):
    """A column holds a value of the wrong shape (bad date, non-number, ...)."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for '{field}': {value!r}", field=field)
        self.value = value


class UnknownVariantError(InvalidFieldError):
    """A type discriminator or enum column holds an unknown value."""
