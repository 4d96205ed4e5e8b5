"""Custom exception hierarchy for coproscope."""

from __future__ import annotations


class CoproscopeError(Exception):
    """Base exception for all coproscope errors."""


class RegistryParseError(CoproscopeError):
    """Raised when a registry column holds a value that cannot be parsed."""

    def __init__(self, column: str, value: object) -> None:
        self.column = column
        self.value = value
        super().__init__(f"Cannot parse registry column '{column}': {value!r}")
