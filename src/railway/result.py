"""Result type: success with a value, or failure with an arbitrary payload.

A Result is either Ok(value) or Error(payload). The payload is whatever the
failing code produced: an exception, a string, a dict. Transformations act on
the Ok channel and short-circuit on Error, so only the happy path is written:

    ```python
    from railway import Result

    def parse(raw: str) -> Result[int]:
        return Result.of_function(lambda: int(raw))

    parse('41').map(lambda x: x + 1).default_value(0)    # 42
    parse('oops').map(lambda x: x + 1).default_value(0)  # 0
    ```

Synchronous observation hooks (``iter`` / ``iter_error``) are called
directly and their exceptions propagate to the caller. Only the asynchronous
``AsyncResult`` hooks are shielded.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

import msgspec

from railway._internal.pointfree import pointfree
from railway.errors import ResultStateMismatchError

__all__ = ['Result', 'ResultKind']


class ResultKind(Enum):
    """Which channel a Result occupies."""

    OK = 'ok'
    ERROR = 'error'


class Result[T](msgspec.Struct, frozen=True, gc=False):
    """Railway result: Ok(value) or Error(payload).

    Build instances with ``of_value``, ``of_error``, ``of_function`` or
    (asynchronously) ``of_promise``.

    Examples:
        >>> Result.of_value(5).map(lambda x: x + 1)
        Ok(6)
        >>> Result.of_error('boom').map(lambda x: x + 1)
        Error('boom')
        >>> Result.of_error('boom').map_error(len)
        Ok(4)
    """

    kind: ResultKind
    payload: Any = None

    # --- Constructors ---

    @classmethod
    def of_value(cls, value: T) -> Result[T]:
        """Wrap ``value`` in an Ok result."""
        return cls(ResultKind.OK, value)

    @classmethod
    def of_error(cls, error: Any) -> Result[Any]:
        """Wrap ``error`` in an Error result. Any payload is accepted."""
        return cls(ResultKind.ERROR, error)

    @classmethod
    def of_function(cls, computation: Callable[[], T]) -> Result[T]:
        """Run ``computation`` and wrap its return value, or the exception it raises.

            ```python
            Result.of_function(lambda: int('5'))  # Ok(5)
            Result.of_function(lambda: int('x'))  # Error(ValueError(...))
            ```
        """
        try:
            return cls.of_value(computation())
        except Exception as exc:
            return cls.of_error(exc)

    @classmethod
    async def of_promise(
        cls, promise: Awaitable[T] | Callable[[], Awaitable[T]]
    ) -> Result[T]:
        """Await ``promise`` and wrap its outcome. Never raises ``Exception``.

        Args:
            promise: An awaitable, or a niladic function returning one. An
                exception raised while calling the function is captured too.

        Returns:
            Ok(resolved value) or Error(raised exception).
        """
        try:
            computation = promise if inspect.isawaitable(promise) else promise()
            value = await computation if inspect.isawaitable(computation) else computation
        except Exception as exc:
            return cls.of_error(exc)
        return cls.of_value(value)

    # --- Introspection ---

    def is_ok(self) -> bool:
        """Return True if this is an Ok result."""
        return self.kind is ResultKind.OK

    def is_error(self) -> bool:
        """Return True if this is an Error result."""
        return self.kind is ResultKind.ERROR

    def get_value(self) -> T:
        """Return the Ok value. Check ``is_ok`` first.

        Raises:
            ResultStateMismatchError: If this is an Error; the error payload is
                kept on the exception's ``payload`` attribute.
        """
        if self.kind is ResultKind.ERROR:
            raise ResultStateMismatchError(
                'Attempted to get the raw value of a Result, but the value was an Error.',
                self.payload,
            )
        return self.payload

    def get_error(self) -> Any:
        """Return the Error payload. Check ``is_error`` first.

        Raises:
            ResultStateMismatchError: If this is Ok; the value is kept on the
                exception's ``payload`` attribute.
        """
        if self.kind is ResultKind.OK:
            raise ResultStateMismatchError(
                'Attempted to get the Error of a Result, but the value was not an Error. '
                f'Value type was {type(self.payload).__name__}.',
                self.payload,
            )
        return self.payload

    # --- Transformations ---

    @pointfree
    def map[U](self, mapper: Callable[[T], U]) -> Result[U]:
        """Map the Ok value to another value. Error passes through."""
        if self.kind is ResultKind.OK:
            return Result.of_value(mapper(self.payload))
        return Result.of_error(self.payload)

    @pointfree
    def map_error(self, mapper: Callable[[Any], T]) -> Result[T]:
        """Map the Error payload back to an Ok value. Ok passes through.

        This is the recovery path: the mapper's return value becomes the
        new Ok value.
        """
        if self.kind is ResultKind.ERROR:
            return Result.of_value(mapper(self.payload))
        return self

    @pointfree
    def bind[U](self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a Result-returning function. Short-circuits on Error."""
        if self.kind is ResultKind.OK:
            return mapper(self.payload)
        return Result.of_error(self.payload)

    @pointfree
    def iter(self, fn: Callable[[T], Any]) -> Result[T]:
        """Call ``fn`` with the Ok value for side effects and return self.

        Exceptions raised by ``fn`` propagate.
        """
        if self.kind is ResultKind.OK:
            fn(self.payload)
        return self

    @pointfree
    def iter_error(self, fn: Callable[[Any], Any]) -> Result[T]:
        """Call ``fn`` with the Error payload for side effects and return self.

        Exceptions raised by ``fn`` propagate.
        """
        if self.kind is ResultKind.ERROR:
            fn(self.payload)
        return self

    @pointfree
    def default_value(self, default: T) -> T:
        """Return the Ok value, or ``default`` on Error."""
        if self.kind is ResultKind.OK:
            return self.payload
        return default

    @pointfree
    def default_with(self, fn: Callable[[Any], T]) -> T:
        """Return the Ok value, or compute one from the Error payload."""
        if self.kind is ResultKind.OK:
            return self.payload
        return fn(self.payload)

    def __repr__(self) -> str:
        if self.kind is ResultKind.OK:
            return f'Ok({self.payload!r})'
        return f'Error({self.payload!r})'
