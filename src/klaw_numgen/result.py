"""Result type: Ok[T] | Err[E], the return shape of every fallible generator."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from klaw_numgen.propagate import Propagate

if TYPE_CHECKING:
    from klaw_numgen.option import Option

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Successful outcome holding a generated value.

    Examples:
        >>> Ok(7).unwrap()
        7
        >>> Ok([3, 1, 2]).map(sorted)
        Ok(value=[1, 2, 3])
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, _msg: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value and wrap the outcome in Ok."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain another fallible step onto the contained value."""
        return f(self.value)

    def ok(self) -> Option[T]:
        """Convert to Some(value)."""
        from klaw_numgen.option import Some

        return Some(self.value)

    def err(self) -> Option[object]:
        from klaw_numgen.option import Nothing

        return Nothing

    def bail(self) -> T:
        """Return the contained value; the Err counterpart returns early instead."""
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failed outcome holding one of the error structs from ``klaw_numgen.errors``.

    Examples:
        >>> from klaw_numgen.errors import InvalidLength
        >>> err = Err(InvalidLength(-1))
        >>> err.is_err()
        True
        >>> err.unwrap_or([])
        []
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            RuntimeError: Always, prefixed with ``msg``.
        """
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        return self

    def ok(self) -> Option[object]:
        from klaw_numgen.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Some(error)."""
        from klaw_numgen.option import Some

        return Some(self.error)

    def bail(self) -> NoReturn:
        """Return this Err from the enclosing ``@result`` function.

        Raises:
            Propagate: Always, carrying this Err.
        """
        raise Propagate(self)


type Result[T, E = Exception] = Ok[T] | Err[E]
