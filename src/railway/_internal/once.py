"""Run-once awaitable stages for the asynchronous wrappers.

A coroutine can only be awaited once, while a pending computation in a chain
may be awaited by any number of downstream stages. ``Once`` bridges the two:
it drives its computation at most once and replays the settled outcome to
every awaiter.

Under asyncio the computation runs in its own driver task, and awaiters wait
on it through ``asyncio.shield``. Cancelling an awaiter therefore never
cancels or consumes the computation. A stage can be started as soon as it is
built (``start``), so continuations run when their source settles whether or
not anybody awaits them. Without a running asyncio loop the computation is
driven inline by its first awaiter.

aiologic provides a lock that works the same under asyncio, trio and threads,
so concurrent awaiters of one stage never start the computation twice.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Generator
from typing import Any

import aiologic

__all__ = ['Once']

# Strong references to running driver tasks; the loop only keeps weak ones.
_drivers: set[asyncio.Task[None]] = set()


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class Once[T]:
    """An awaitable whose computation runs at most once.

    The outcome (value or ``Exception``) is cached after the first settle.
    Cancelling an awaiter leaves the computation running, and the next
    awaiter picks up its outcome.

    Examples:
        >>> async def fetch() -> int:
        ...     print('fetching')
        ...     return 42
        >>> stage = Once(fetch)
        >>> await stage  # prints 'fetching'
        42
        >>> await stage  # cached
        42
    """

    __slots__ = ('_driver', '_error', '_factory', '_lock', '_settled', '_value')

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        """Create a lazy stage from a factory returning the awaitable to drive.

        Args:
            factory: Called once, when the stage starts, to begin the computation.
        """
        self._factory: Callable[[], Awaitable[T]] | None = factory
        self._driver: asyncio.Task[None] | None = None
        self._lock = aiologic.Lock()
        self._settled = False
        self._value: T | None = None
        self._error: Exception | None = None

    @classmethod
    def of(cls, awaitable: Awaitable[T]) -> Once[T]:
        """Wrap an existing awaitable (coroutine, future, task, ...) and start it."""
        if isinstance(awaitable, Once):
            return awaitable
        return cls(lambda: awaitable).start()

    @classmethod
    def resolved(cls, value: T) -> Once[T]:
        """Create a stage that is already settled with ``value``."""
        stage: Once[T] = cls.__new__(cls)
        stage._factory = None
        stage._driver = None
        stage._lock = aiologic.Lock()
        stage._settled = True
        stage._value = value
        stage._error = None
        return stage

    def is_settled(self) -> bool:
        """Check whether the computation has already settled."""
        return self._settled

    def start(self) -> Once[T]:
        """Begin the computation now if an asyncio loop is running; return self."""
        if not self._settled:
            self._ensure_driver()
        return self

    async def get(self) -> T:
        """Await the computation, starting it if nobody has yet."""
        if not self._settled:
            async with self._lock:
                if not self._settled:
                    driver = self._ensure_driver()
                    if driver is None:
                        await self._settle()
                    else:
                        await asyncio.shield(driver)
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def _ensure_driver(self) -> asyncio.Task[None] | None:
        if self._driver is None or self._driver.cancelled():
            loop = _running_loop()
            if loop is None:
                return None
            self._driver = loop.create_task(self._settle())
            _drivers.add(self._driver)
            self._driver.add_done_callback(_drivers.discard)
        return self._driver

    async def _settle(self) -> None:
        if self._settled:
            return
        factory = self._factory
        assert factory is not None
        try:
            self._value = await factory()
        except Exception as exc:
            self._error = exc
        self._settled = True
        self._factory = None

    def __await__(self) -> Generator[Any, Any, T]:
        return self.get().__await__()

    def __repr__(self) -> str:
        if not self._settled:
            return 'Once(<pending>)'
        if self._error is not None:
            return f'Once(<raised {self._error!r}>)'
        return f'Once({self._value!r})'
