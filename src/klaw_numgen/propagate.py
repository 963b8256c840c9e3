"""Propagate exception carrying an early-return value for ``.bail()``."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Raised by ``Err.bail()`` and ``Nothing.bail()``.

    The ``@result`` decorator catches it and returns the carried value, so a
    validation helper deep inside a generator can end the call early.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Err or Nothing being returned early."""
        return self._value
