"""compute(): evaluate a block of code as a single expression.

Temporary variables used to build one value stay inside the block, and the
name bound to the result is assigned exactly once:

    ```python
    order = await compute(async_block)

    @compute
    def settings() -> dict:
        raw = load_raw()
        defaults = load_defaults()
        return {**defaults, **raw}

    settings  # the dict, not the function
    ```
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['compute']


def compute[T](block: Callable[[], T]) -> T:
    """Invoke ``block`` and return its result (a coroutine if ``block`` is async)."""
    return block()
