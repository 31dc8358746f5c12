"""Methods that double as curried, point-free functions.

A method decorated with ``@pointfree`` behaves normally on an instance, and
when read from the class returns a factory that binds the configuration
arguments and waits for the wrapper:

    ```python
    Option.of_some(2).map(double)     # Some(4)
    Option.map(double)(Option.of_some(2))  # Some(4)
    pipe(Option.of_some(2)).chain(Option.map(double)).value()  # Some(4)
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from types import MethodType
from typing import Any

__all__ = ['pointfree']


class pointfree[W, R]:  # noqa: N801
    """Descriptor giving a method both a bound and a curried form."""

    def __init__(self, func: Callable[..., R]) -> None:
        self._func = func
        self._name = func.__name__
        functools.update_wrapper(self, func)

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: W | None, owner: type | None = None) -> Callable[..., Any]:
        if instance is None:
            return self._curried
        return MethodType(self._func, instance)

    def _curried(self, *args: Any, **kwargs: Any) -> Callable[[W], R]:
        func = self._func

        def apply(wrapper: W) -> R:
            return func(wrapper, *args, **kwargs)

        apply.__name__ = self._name
        apply.__qualname__ = f'{self._func.__qualname__}.<curried>'
        apply.__doc__ = self._func.__doc__
        return apply

    def __repr__(self) -> str:
        return f'<pointfree {self._func.__qualname__}>'
