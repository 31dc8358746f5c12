"""Option type: presence or absence of a value, with no reason attached.

Example:
    ```python
    from railway import Option

    name = Option.of_some('  ada ').map(str.strip).map(str.title)
    name.default_value('anonymous')  # 'Ada'

    Option.of_none().map(str.strip).default_value('anonymous')  # 'anonymous'
    ```

Every method taking arguments is also available in curried form from the
class, for use with ``pipe``:

    ```python
    pipe(Option.of_some(5)).chain(Option.map(lambda x: x + 1)).chain(Option.get).value()
    # 6
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from railway._internal.pointfree import pointfree
from railway.errors import EmptyValueAccessError, InvalidArgumentError

__all__ = ['Option']


class Option[T](msgspec.Struct, frozen=True, gc=False):
    """An optional value: either Some(value) or None.

    ``None`` is never a valid Some payload; a stored ``None`` is the None
    variant. Build instances with ``Option.of_some`` / ``Option.of_none``.

    Examples:
        >>> Option.of_some(42).map(lambda x: x * 2)
        Some(84)
        >>> Option.of_none().is_none()
        True
        >>> Option.of_some(None)
        Traceback (most recent call last):
        ...
        railway.errors.InvalidArgumentError: [invalid_argument] Option.of_some received None.
    """

    value: T | None = None

    @classmethod
    def of_some(cls, value: T) -> Option[T]:
        """Wrap a present value.

        Raises:
            InvalidArgumentError: If ``value`` is None. Use ``of_none`` for absence.
        """
        if value is None:
            raise InvalidArgumentError('Option.of_some received None.')
        return cls(value)

    @classmethod
    def of_none(cls) -> Option[Any]:
        """Create an option with no value."""
        return cls()

    def is_some(self) -> bool:
        """Return True if the option holds a value."""
        return self.value is not None

    def is_none(self) -> bool:
        """Return True if the option holds no value."""
        return self.value is None

    def get(self) -> T:
        """Return the wrapped value.

        Check ``is_some`` first: calling this on None always raises.

        Raises:
            EmptyValueAccessError: If the option is None.
        """
        if self.value is None:
            raise EmptyValueAccessError
        return self.value

    @pointfree
    def map[U](self, mapper: Callable[[T], U]) -> Option[U]:
        """Map the value to another value. Only runs if the option is Some.

        The mapped value is wrapped with ``of_some``, so a mapper returning
        None raises ``InvalidArgumentError``.
        """
        if self.value is not None:
            return Option.of_some(mapper(self.value))
        return Option.of_none()

    @pointfree
    def bind[U](self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        """Bind the value to the option returned by ``mapper``. Only runs if Some."""
        if self.value is not None:
            return mapper(self.value)
        return Option.of_none()

    @pointfree
    def iter(self, fn: Callable[[T], Any]) -> None:
        """Pass the value to ``fn`` for side effects. Only runs if Some."""
        if self.value is not None:
            fn(self.value)

    @pointfree
    def default_value(self, default: T) -> T:
        """Return the value, or ``default`` if the option is None."""
        if self.value is not None:
            return self.value
        return default

    @pointfree
    def default_with(self, fn: Callable[[], T]) -> T:
        """Return the value, or compute a fallback with ``fn`` if the option is None."""
        if self.value is not None:
            return self.value
        return fn()

    def __repr__(self) -> str:
        if self.value is None:
            return 'Nothing'
        return f'Some({self.value!r})'
