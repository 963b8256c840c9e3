"""Option type: Some[T] | Nothing, used for the "no selection" outcome of a pick."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from klaw_numgen.propagate import Propagate

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A selected value.

    ``Some(None)`` is a selection of ``None``, not an empty selection.

    Examples:
        >>> Some('b').unwrap()
        'b'
        >>> Some(3).map(lambda x: x * 2)
        Some(value=6)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, _msg: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply ``f`` to the selected value."""
        return Some(f(self.value))

    def bail(self) -> T:
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """No selection.

    Use the ``Nothing`` singleton rather than instantiating this class; all
    instances compare equal anyway.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since nothing was selected.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def bail(self) -> NoReturn:
        """Return Nothing from the enclosing ``@result`` function.

        Raises:
            Propagate: Always, carrying Nothing.
        """
        raise Propagate(self)


Nothing: NothingType = NothingType()
"""Singleton for the empty selection."""


type Option[T] = Some[T] | NothingType
