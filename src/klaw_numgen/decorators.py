"""@result decorator turning ``.bail()`` into an early return."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from klaw_numgen.propagate import Propagate
from klaw_numgen.result import Err, Ok

__all__ = ['result']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E')


def result(func: Callable[P, Ok[T] | Err[E]]) -> Callable[P, Ok[T] | Err[E]]:
    """Catch ``Propagate`` raised inside ``func`` and return its value.

    Synchronous functions only.

    Example:
        ```python
        @result
        def checked_span(domain: Domain, a: int, b: int) -> Result[int, OutOfDomain]:
            bounds = domain.bounds(a, b).bail()
            return Ok(bounds.size)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Ok[T] | Err[E]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[E]:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value  # type: ignore[return-value]

    return wrapper(func)  # type: ignore[return-value]
