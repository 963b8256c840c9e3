"""Sequences of random values, optionally pairwise distinct.

Distinct integers are drawn with linear probing over a range that shrinks
as its endpoints are used up, so the cost stays linear in the requested
length even when the request consumes the whole range. Distinct floats
redraw on collision instead; a float range is practically never exhausted.
"""

from __future__ import annotations

from typing import Any

from klaw_numgen._config import get_config
from klaw_numgen._logging import get_logger
from klaw_numgen.decorators import result
from klaw_numgen.domain import Bounds, Domain
from klaw_numgen.errors import InvalidLength, OutOfDomain, RangeTooLarge, RangeTooSmall
from klaw_numgen.result import Err, Ok, Result
from klaw_numgen.sampler import full_domain_value, sample_bounds
from klaw_numgen.source import UnitSource, random_below, resolve_source

__all__ = ['random_permutation', 'random_sequence']

logger = get_logger(__name__)


def _reject[E](error: E) -> Err[E]:
    logger.debug('sequence_rejected', error=repr(error))
    return Err(error)


@result
def random_sequence(
    domain: Domain,
    a: Any,
    b: Any,
    length: int,
    unique: bool = True,  # noqa: FBT001, FBT002
    *,
    source: UnitSource | None = None,
) -> Result[list[int | float], InvalidLength | OutOfDomain | RangeTooSmall]:
    """Draw ``length`` values from the inclusive range between ``a`` and ``b``.

    Args:
        domain: The numeric domain of the values.
        a: One bound of the range.
        b: The other bound, in either order.
        length: Number of values, at least 0.
        unique: If True, the values are pairwise distinct.
        source: Uniform source, the stdlib generator by default.

    Returns:
        ``Ok(values)``, or the first failing check as ``Err``:
        ``InvalidLength`` for a negative length, ``OutOfDomain`` for a bound
        outside the domain, ``RangeTooSmall`` when a unique request asks
        for more values than the range holds. Nothing is drawn when a check
        fails.

    Example:
        ```python
        random_sequence(Domain.INT8, 0, 9, 10)           # Ok(permutation of 0..9)
        random_sequence(Domain.INT8, 0, 9, 11)           # Err(RangeTooSmall(11, 10))
        random_sequence(Domain.FLOAT64, 0.0, 1.0, 3, False)
        ```
    """
    if length < 0:
        return _reject(InvalidLength(length))
    bounds = domain.bounds(a, b).bail()
    rng = resolve_source(source)

    if not unique:
        return Ok([sample_bounds(bounds, rng) for _ in range(length)])

    size = bounds.size
    if length > size:
        return _reject(RangeTooSmall(length, size))
    if domain.is_float:
        return Ok(_distinct_floats(bounds, length, rng))
    return Ok(_distinct_integers(bounds, length, rng))


def _distinct_integers(bounds: Bounds, length: int, rng: UnitSource) -> list[int | float]:
    domain = bounds.domain
    lo, hi = bounds.lo, bounds.hi
    chosen: set[int] = set()
    values: list[int | float] = []
    for _ in range(length):
        if lo == domain.min_value and hi == domain.max_value:
            value = full_domain_value(domain, rng)
        else:
            value = lo + random_below(rng, hi - lo + 1)
        # probe upward with wraparound; the live range always holds a free value
        while value in chosen:
            value = lo if value == hi else value + 1
        if value == hi:
            hi -= 1
        if value == lo:
            lo += 1
        chosen.add(value)
        values.append(value)
    return values


def _distinct_floats(bounds: Bounds, length: int, rng: UnitSource) -> list[int | float]:
    chosen: set[float] = set()
    values: list[int | float] = []
    for _ in range(length):
        value = sample_bounds(bounds, rng)
        while value in chosen:
            value = sample_bounds(bounds, rng)
        chosen.add(value)
        values.append(value)
    return values


@result
def random_permutation(
    domain: Domain,
    a: Any,
    b: Any,
    *,
    source: UnitSource | None = None,
) -> Result[list[int | float], OutOfDomain | RangeTooLarge]:
    """Return every integer between ``a`` and ``b`` once, in random order.

    Returns:
        ``Ok(values)``; ``Err(OutOfDomain)`` for a float domain or a bound
        outside the domain; ``Err(RangeTooLarge)`` when the range holds more
        values than ``get_config().max_sequence_length``.
    """
    if domain.is_float:
        return _reject(OutOfDomain(domain.value, (a, b)))
    bounds = domain.bounds(a, b).bail()
    size = bounds.size
    limit = get_config().max_sequence_length
    if size > limit:
        return _reject(RangeTooLarge(size, limit))
    return random_sequence(domain, bounds.lo, bounds.hi, size, unique=True, source=source)
