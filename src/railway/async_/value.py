"""Async type: a pending computation with chainable continuations.

Async has no failure channel of its own. An exception raised by the wrapped
computation, or by any continuation, surfaces when the chain is awaited.
``get_result`` converts it into a ``Result`` instead.

Example:
    ```python
    async def load(user_id: int) -> dict: ...

    name = await Async.of_promise(load(1)).map(lambda user: user['name']).get()
    outcome = await Async.of_promise(load(2)).get_result()  # Ok(...) or Error(exc)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any

from railway._internal.once import Once
from railway._internal.pointfree import pointfree
from railway.result import Result

__all__ = ['Async']


class Async[T]:
    """Wrap an awaitable and chain work onto it.

    Every transformation returns a new Async whose stage awaits the previous
    one. Inside a running event loop each stage is scheduled when it is
    built and its continuation runs once the previous stage settles, awaited
    or not. Stages run at most once: awaiting a chain twice, or awaiting two
    branches of one parent, never restarts the shared computation.

    Attributes:
        _stage: The run-once awaitable holding the computation.
    """

    __slots__ = ('_stage',)

    def __init__(self, stage: Once[T]) -> None:
        self._stage = stage

    @classmethod
    def of_promise(cls, promise: Awaitable[T]) -> Async[T]:
        """Create an Async from an awaitable (coroutine, task, future, ...)."""
        return cls(Once.of(promise))

    @classmethod
    def wrap(cls, value: T) -> Async[T]:
        """Wrap a plain value in an already-resolved Async."""
        return cls(Once.resolved(value))

    def get(self) -> Awaitable[T]:
        """Return the underlying awaitable. It may be awaited any number of times."""
        return self._stage

    def get_result(self) -> Awaitable[Result[T]]:
        """Return an awaitable resolving to Ok(value) or Error(raised exception)."""
        return Result.of_promise(self.get)

    @pointfree
    def map[U](self, mapper: Callable[[T], U]) -> Async[U]:
        """Map the resolved value to another value.

        The mapper's return value is not awaited: an awaitable returned by
        ``mapper`` becomes the resolved value. Use ``bind`` to flatten.
        """
        source = self._stage

        async def _mapped() -> U:
            return mapper(await source)

        return Async(Once(_mapped).start())

    @pointfree
    def bind[U](self, mapper: Callable[[T], Async[U]]) -> Async[U]:
        """Bind the resolved value to the Async returned by ``mapper``, flattening it."""
        source = self._stage

        async def _bound() -> U:
            return await mapper(await source)

        return Async(Once(_bound).start())

    @pointfree
    def iter(self, fn: Callable[[T], Any]) -> Async[T]:
        """Pass the resolved value to ``fn`` and keep the value unchanged downstream.

        ``fn`` may be a coroutine function. Exceptions it raises fail the stage.
        """
        source = self._stage

        async def _observed() -> T:
            value = await source
            outcome = fn(value)
            if inspect.isawaitable(outcome):
                await outcome
            return value

        return Async(Once(_observed).start())

    def __await__(self) -> Generator[Any, Any, T]:
        return self._stage.__await__()

    def __repr__(self) -> str:
        return f'Async({self._stage!r})'
