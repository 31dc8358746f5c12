"""Exceptions raised when a wrapper is used against its contract.

These are programming errors: reading the value of an empty Option, building
Some from None, or reading the wrong channel of a Result. They are raised,
never wrapped into the Error channel by the type that detects them.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'EmptyValueAccessError',
    'InvalidArgumentError',
    'RailwayError',
    'ResultStateMismatchError',
]


class RailwayError(Exception):
    """Base exception for misuse of the railway wrapper types.

    Attributes:
        message: A human-readable description of the error.
        code: A stable identifier for programmatic handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class InvalidArgumentError(RailwayError, ValueError):
    """A constructor received a value it cannot wrap (e.g. Some(None))."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='invalid_argument')


class EmptyValueAccessError(RailwayError):
    """The value of an empty Option was requested."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or 'Attempted to get an option value that was none. '
            'Use Option.is_some to check if an option has a value before using it.',
            code='empty_value_access',
        )


class ResultStateMismatchError(RailwayError):
    """The wrong channel of a Result was read.

    Attributes:
        payload: The payload actually held by the Result (the error when the
            value was requested, the value when the error was requested).
    """

    def __init__(self, message: str, payload: Any) -> None:
        self.payload = payload
        super().__init__(message, code='result_state_mismatch')
