"""Exceptions raised by debounce-kit."""

from __future__ import annotations


class DebounceError(Exception):
    """Base exception for debounce-kit errors."""

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


class InvalidArgumentError(DebounceError, TypeError):
    """A value handed to the wrapper factory cannot be used."""
    pass
