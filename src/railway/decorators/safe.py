"""@safe and @safe_async decorators: functions that return railway types.

``@safe`` is the decorator form of ``Result.of_function``; ``@safe_async``
turns a coroutine function into one returning an ``AsyncResult``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from railway.async_.result import AsyncResult
from railway.result import Result

__all__ = ['safe', 'safe_async']


def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T]]:
    """Decorator that returns Ok(return value) or Error(raised exception).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Ok(5.0)
        divide(10, 0)
        # Error(ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T]:
        return Result.of_function(lambda: wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]


def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, AsyncResult[T]]:
    """Decorator that makes an async function return an AsyncResult.

    Inside a running event loop the call schedules the coroutine; its
    outcome is read by awaiting the AsyncResult or a chain built on it.
    Exceptions become the Error channel.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        result = await fetch('https://example.org').map(len)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> AsyncResult[T]:
        try:
            return AsyncResult.wrap(wrapped(*args, **kwargs))
        except Exception as exc:
            return AsyncResult.wrap(Result.of_error(exc))

    return wrapper(func)  # type: ignore[return-value]
