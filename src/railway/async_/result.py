"""AsyncResult type: a pending computation that always settles to a Result.

AsyncResult merges two failure models. An awaitable can raise, while a Result
carries its failure as data. Every stage of an AsyncResult catches exceptions,
including those raised by the wrapped awaitable and by caller callbacks, and
turns them into Error. Awaiting an AsyncResult therefore never raises an
``Exception``.

Example:
    ```python
    async def fetch_user(user_id: int) -> dict: ...

    result = await (
        AsyncResult.wrap(fetch_user(1))
        .map(lambda user: user['email'])
        .bind(lambda email: AsyncResult.wrap(send_welcome(email)))
        .iter_error(lambda err: print('welcome failed:', err))
    )
    result.is_ok()
    ```

Observation hooks (``iter`` / ``iter_error``) cannot affect the chain. An
exception they raise is swallowed and, when logging is configured, reported as
a ``hook_failed`` warning.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any

from railway._config import get_config
from railway._internal.once import Once
from railway._internal.pointfree import pointfree
from railway._logging import get_logger
from railway.result import Result

__all__ = ['AsyncResult']

_logger = get_logger(__name__)


def _report_hook_failure(hook: Callable[..., Any], channel: str, exc: Exception) -> None:
    if not get_config().logging_enabled:
        return
    _logger.warning(
        'hook_failed',
        hook=getattr(hook, '__qualname__', repr(hook)),
        channel=channel,
        error=repr(exc),
    )


async def _settle[T](awaitable: Awaitable[T | Result[T]]) -> Result[T]:
    """Await ``awaitable``, flattening a Result outcome and capturing exceptions."""
    try:
        outcome = await awaitable
    except Exception as exc:
        return Result.of_error(exc)
    if isinstance(outcome, Result):
        return outcome
    return Result.of_value(outcome)


async def _observe(hook: Callable[[Any], Any], channel: str, payload: Any) -> None:
    try:
        outcome = hook(payload)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as exc:
        _report_hook_failure(hook, channel, exc)


class AsyncResult[T]:
    """Async-aware Result wrapper for composing fallible async operations.

    AsyncResult holds a run-once stage resolving to ``Result[T]``. Each
    transformation returns a new AsyncResult whose stage awaits the previous
    one. Inside a running event loop every stage starts as soon as it is
    built, so its callback runs when the previous stage settles even if the
    new AsyncResult is never awaited. Outside a loop a stage runs when first
    awaited. Stages are never restarted, so an AsyncResult (and any of its
    ancestors) can be awaited repeatedly.

    Build instances with ``AsyncResult.wrap``.

    Example:
        ```python
        async def example():
            result = await AsyncResult.wrap(5).map(lambda x: x * 2)
            assert result == Result.of_value(10)
        ```
    """

    __slots__ = ('_stage',)

    def __init__(self, stage: Once[Result[T]]) -> None:
        self._stage = stage

    @classmethod
    def wrap(cls, value: Any) -> AsyncResult[Any]:
        """Wrap a value, Result, or awaitable of either in an AsyncResult.

        - ``AsyncResult``: returned as is.
        - ``Result``: resolves to it.
        - awaitable: resolves to its Result, to Ok(value) for any other value,
          or to Error(exc) if it raises.
        - anything else: resolves to Ok(value).
        """
        if isinstance(value, AsyncResult):
            return value
        if isinstance(value, Result):
            return cls(Once.resolved(value))
        if inspect.isawaitable(value):
            source = Once.of(value)
            return cls(Once(lambda: _settle(source)).start())
        return cls(Once.resolved(Result.of_value(value)))

    def get(self) -> Awaitable[Result[T]]:
        """Return the underlying awaitable, which resolves to a Result."""
        return self._stage

    @pointfree
    def map[U](self, fn: Callable[[T], U]) -> AsyncResult[U]:
        """Map the Ok value to another value. Only runs if the result is Ok.

        If ``fn`` raises, the new AsyncResult resolves to Error(exception).
        """
        source = self._stage

        async def _mapped() -> Result[U]:
            result = await source
            if result.is_error():
                return result
            return Result.of_function(lambda: fn(result.payload))

        return AsyncResult(Once(_mapped).start())

    @pointfree
    def map_error(self, fn: Callable[[Any], T]) -> AsyncResult[T]:
        """Map the Error payload back to an Ok value. Only runs if the result is Error.

        If ``fn`` raises, the new AsyncResult resolves to Error(new exception).
        """
        source = self._stage

        async def _recovered() -> Result[T]:
            result = await source
            if result.is_ok():
                return result
            return Result.of_function(lambda: fn(result.payload))

        return AsyncResult(Once(_recovered).start())

    @pointfree
    def bind[U](self, fn: Callable[[T], AsyncResult[U]]) -> AsyncResult[U]:
        """Bind the Ok value to the AsyncResult returned by ``fn``. Only runs if Ok.

        The original error is preserved on Error. If ``fn`` raises, or the
        returned computation fails, the new AsyncResult resolves to Error.
        """
        source = self._stage

        async def _chained() -> Result[U]:
            result = await source
            if result.is_error():
                return Result.of_error(result.payload)
            try:
                next_ = fn(result.payload)
            except Exception as exc:
                return Result.of_error(exc)
            return await AsyncResult.wrap(next_).get()

        return AsyncResult(Once(_chained).start())

    @pointfree
    def bind_error(self, fn: Callable[[Any], AsyncResult[T]]) -> AsyncResult[T]:
        """Bind the Error payload to the AsyncResult returned by ``fn``. Only runs if Error."""
        source = self._stage

        async def _rebound() -> Result[T]:
            result = await source
            if result.is_ok():
                return result
            try:
                next_ = fn(result.payload)
            except Exception as exc:
                return Result.of_error(exc)
            return await AsyncResult.wrap(next_).get()

        return AsyncResult(Once(_rebound).start())

    @pointfree
    def iter(self, fn: Callable[[T], Any]) -> AsyncResult[T]:
        """Pass the Ok value to ``fn``. Only runs if Ok.

        The resolved Result is unchanged whatever ``fn`` does; its exceptions
        are swallowed.
        """
        source = self._stage

        async def _observed() -> Result[T]:
            result = await source
            if result.is_ok():
                await _observe(fn, 'ok', result.payload)
            return result

        return AsyncResult(Once(_observed).start())

    @pointfree
    def iter_error(self, fn: Callable[[Any], Any]) -> AsyncResult[T]:
        """Pass the Error payload to ``fn``. Only runs if Error.

        The resolved Result is unchanged whatever ``fn`` does; its exceptions
        are swallowed.
        """
        source = self._stage

        async def _observed() -> Result[T]:
            result = await source
            if result.is_error():
                await _observe(fn, 'error', result.payload)
            return result

        return AsyncResult(Once(_observed).start())

    @pointfree
    async def default_value(self, default: T) -> T:
        """Await the result and return the Ok value, or ``default`` on Error."""
        result = await self._stage
        return result.default_value(default)

    def __await__(self) -> Generator[Any, Any, Result[T]]:
        return self._stage.__await__()

    def __repr__(self) -> str:
        return f'AsyncResult({self._stage!r})'
