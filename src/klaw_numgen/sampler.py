"""Single-value sampling over a fixed-width domain.

``random_value(domain)`` covers the whole domain. ``random_value(domain, a,
b)`` draws uniformly from the inclusive range between two bounds given in
either order.
"""

from __future__ import annotations

import math
from typing import Any, overload

from klaw_numgen._logging import get_logger
from klaw_numgen.domain import Bounds, Domain, bits_to_float
from klaw_numgen.errors import OutOfDomain
from klaw_numgen.result import Result
from klaw_numgen.source import UnitSource, random_below, random_bits, resolve_source

__all__ = ['full_domain_value', 'random_value', 'sample_bounds']

logger = get_logger(__name__)

_UNSET: Any = object()


def full_domain_value(domain: Domain, source: UnitSource | None = None) -> int | float:
    """Draw a value spanning the entire representable space of ``domain``.

    Integer domains get a uniform two's-complement value. Float domains get
    a uniformly random bit pattern reinterpreted as a float, so NaN,
    infinities and subnormals are all possible outputs.
    """
    rng = resolve_source(source)
    raw = random_bits(rng, domain.bits)
    if domain.is_float:
        return bits_to_float(raw, domain.bits)
    return raw + domain.min_value


def sample_bounds(bounds: Bounds, source: UnitSource) -> int | float:
    """Draw one value from already-normalized bounds."""
    if bounds.domain.is_float:
        return _sample_float(bounds, source)
    if bounds.is_full_domain:
        return full_domain_value(bounds.domain, source)
    return bounds.lo + random_below(source, bounds.hi - bounds.lo + 1)


def _sample_float(bounds: Bounds, source: UnitSource) -> float:
    lo, hi = bounds.lo, bounds.hi
    u = source.random()
    span = hi - lo
    if math.isfinite(span):
        value = lo + u * span
    else:
        # Only ranges wider than the largest finite double get here.
        value = u * hi + (1.0 - u) * lo
    return bounds.domain.coerce(min(max(value, lo), hi))


@overload
def random_value(domain: Domain, *, source: UnitSource | None = None) -> int | float: ...


@overload
def random_value(
    domain: Domain, a: Any, b: Any, *, source: UnitSource | None = None
) -> Result[int | float, OutOfDomain]: ...


def random_value(
    domain: Domain,
    a: Any = _UNSET,
    b: Any = _UNSET,
    *,
    source: UnitSource | None = None,
) -> int | float | Result[int | float, OutOfDomain]:
    """Draw one random value of ``domain``.

    Args:
        domain: The numeric domain to sample.
        a: One bound of the inclusive range. Omit both bounds for a
            full-domain sample.
        b: The other bound, smaller or larger than ``a``.
        source: Uniform source, the stdlib generator by default.

    Returns:
        The value itself for a full-domain sample, otherwise ``Ok(value)``
        with ``min(a, b) <= value <= max(a, b)``, or ``Err(OutOfDomain)``
        when a bound does not fit the domain.

    Raises:
        TypeError: If exactly one bound is given.

    Example:
        ```python
        random_value(Domain.INT64)                     # any int64
        random_value(Domain.INT8, 10, -10).unwrap()    # -10..10
        random_value(Domain.FLOAT32, 0.0, 1.0)         # Ok(float32 in [0, 1])
        ```
    """
    if a is _UNSET and b is _UNSET:
        return full_domain_value(domain, source)
    if a is _UNSET or b is _UNSET:
        msg = 'random_value() takes both bounds or neither'
        raise TypeError(msg)

    checked = domain.bounds(a, b)
    if checked.is_err():
        logger.debug('bound_rejected', domain=domain.value, value=checked.error.value)
        return checked
    return checked.map(lambda bounds: sample_bounds(bounds, resolve_source(source)))
