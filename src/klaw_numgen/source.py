"""Uniform unit sources and the integer helpers built on them.

Every generator draws its randomness from a ``UnitSource``: any object with
a ``random()`` method returning a float in ``[0, 1)``. The stdlib ``random``
module, ``random.Random`` instances and compatible PRNG bindings all qualify.
Integers wider than a double's 53-bit mantissa are assembled from several
draws rather than from one scaled float.
"""

from __future__ import annotations

import random as _stdlib_random
from typing import Protocol

__all__ = [
    'UnitSource',
    'random_below',
    'random_bits',
    'resolve_source',
]

_CHUNK_BITS = 32
_EXACT_SPAN = 1 << 53


class UnitSource(Protocol):
    """Anything that produces uniform floats in ``[0, 1)``."""

    def random(self) -> float: ...


def resolve_source(source: UnitSource | None) -> UnitSource:
    """Return ``source``, or the process-wide stdlib generator when None."""
    if source is None:
        return _stdlib_random
    return source


def random_bits(source: UnitSource, bits: int) -> int:
    """Return a uniform unsigned integer of ``bits`` width.

    Built from 32-bit chunks. Scaling a double in ``[0, 1)`` by a power of
    two is exact, so each chunk is uniform over its ``2**32`` outcomes.
    """
    value = 0
    remaining = bits
    while remaining > 0:
        take = min(_CHUNK_BITS, remaining)
        value = (value << take) | int(source.random() * (1 << take))
        remaining -= take
    return value


def random_below(source: UnitSource, n: int) -> int:
    """Return a uniform integer in ``[0, n)`` for ``n >= 1``.

    Spans up to ``2**53`` use ``floor(u * n)``, which splits ``[0, 1)`` into
    ``n`` equal-width buckets. Wider spans would leave most outcomes
    unreachable that way, so they draw ``n.bit_length()`` raw bits and
    reject anything ``>= n``; each attempt succeeds with probability above
    one half.
    """
    if n <= _EXACT_SPAN:
        # u * n can round up to n when u is the largest double below 1
        return min(int(source.random() * n), n - 1)
    width = n.bit_length()
    while True:
        candidate = random_bits(source, width)
        if candidate < n:
            return candidate
