"""pipe() for threading a value through a sequence of functions.

Python has no user-defined pipe operator, so ``pipe`` returns a small chain
object. Functions run as they are chained, not when the value is read:

    ```python
    pipe('5').chain(int).chain(lambda x: x * 2).value()  # 10

    pipe(Result.of_value(5)) | Result.map(str) | Result.get_value  # Pipe('5')
    ```

Combined with the curried twins of the wrapper types, this gives point-free
railway pipelines.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

__all__ = ['Pipe', 'pipe']


class Pipe[T](msgspec.Struct, frozen=True, gc=False):
    """An immutable step in a function chain holding the current value."""

    current: T

    def chain[R](self, fn: Callable[[T], R]) -> Pipe[R]:
        """Apply ``fn`` to the current value and return a new Pipe of the output."""
        return Pipe(fn(self.current))

    def value(self) -> T:
        """Return the current value."""
        return self.current

    def __or__[R](self, fn: Callable[[T], R]) -> Pipe[R]:
        """Pipe operator for chaining: pipe(x) | f is pipe(x).chain(f)."""
        return self.chain(fn)

    def __repr__(self) -> str:
        return f'Pipe({self.current!r})'


def pipe[T](value: T, *fns: Callable[[Any], Any]) -> Pipe[Any]:
    """Start a chain from ``value``, applying any ``fns`` in order.

    Args:
        value: The initial value.
        *fns: Functions to chain immediately.

    Returns:
        A Pipe exposing ``chain`` and ``value``.

    Example:
        ```python
        pipe(5, lambda x: x + 1, str).value()
        # '6'
        ```
    """
    current: Pipe[Any] = Pipe(value)
    for fn in fns:
        current = current.chain(fn)
    return current
