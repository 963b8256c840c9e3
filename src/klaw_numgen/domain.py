"""Fixed-width numeric domains and inclusive range normalization.

A ``Domain`` names one of six representations: signed 8/16/32/64-bit
integers and IEEE-754 single/double floats. Python numbers have no fixed
width, so the domain carries the width explicitly and every bound handed
to a generator is checked against it.

Usage:
    >>> from klaw_numgen.domain import Domain
    >>> Domain.INT8.min_value, Domain.INT8.max_value
    (-128, 127)
    >>> Domain.INT16.bounds(5, -5).unwrap()
    Bounds(domain=<Domain.INT16: 'int16'>, lo=-5, hi=5)
"""

from __future__ import annotations

import math
import operator
import struct
import sys
from enum import Enum
from typing import Any

import msgspec

from klaw_numgen.errors import OutOfDomain
from klaw_numgen.result import Err, Ok, Result

__all__ = [
    'FLOAT32_MAX',
    'Bounds',
    'Domain',
    'bits_to_float',
    'float_ordinal',
    'to_float32',
]

FLOAT32_MAX = 3.4028234663852886e38
"""Largest finite single-precision value."""

_FLOAT_CODES = {32: ('<I', '<f'), 64: ('<Q', '<d')}


def to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value.

    Raises:
        OverflowError: If ``value`` is finite but beyond the float32 range.
    """
    return struct.unpack('<f', struct.pack('<f', value))[0]


def bits_to_float(bits: int, width: int) -> float:
    """Reinterpret an unsigned ``width``-bit pattern as an IEEE-754 float.

    Every pattern is accepted, so NaN, infinities and subnormals come back
    as ordinary Python floats.
    """
    int_code, float_code = _FLOAT_CODES[width]
    return struct.unpack(float_code, struct.pack(int_code, bits))[0]


def float_ordinal(value: float, width: int) -> int:
    """Map a float to an integer that preserves ordering.

    Adjacent representable values of the given width map to adjacent
    integers, and ``-0.0`` maps to the same ordinal as ``0.0``.
    """
    int_code, float_code = _FLOAT_CODES[width]
    bits = struct.unpack(int_code, struct.pack(float_code, value))[0]
    sign = 1 << (width - 1)
    if bits & sign:
        return -(bits ^ sign)
    return bits


class Domain(Enum):
    """Fixed-width numeric representation."""

    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'

    @property
    def bits(self) -> int:
        return _WIDTHS[self]

    @property
    def is_float(self) -> bool:
        return self in (Domain.FLOAT32, Domain.FLOAT64)

    @property
    def min_value(self) -> int | float:
        """Smallest representable value (most negative finite for floats)."""
        return -self.max_value if self.is_float else -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int | float:
        """Largest representable value (largest finite for floats)."""
        if self is Domain.FLOAT32:
            return FLOAT32_MAX
        if self is Domain.FLOAT64:
            return sys.float_info.max
        return (1 << (self.bits - 1)) - 1

    def coerce(self, value: float) -> int | float:
        """Round a generated value to the domain's precision."""
        if self is Domain.FLOAT32:
            return to_float32(value)
        return value

    def check(self, value: Any) -> Result[int | float, OutOfDomain]:
        """Validate one bound and convert it to the domain's Python type.

        Integer domains accept anything implementing ``__index__`` inside the
        domain's range. Float domains accept finite reals; float32 bounds
        must lie within the finite single-precision range and are rounded to
        it. Booleans are rejected by every domain.
        """
        if isinstance(value, bool):
            return Err(OutOfDomain(self.value, value))
        if self.is_float:
            try:
                number = float(value)
            except (TypeError, ValueError, OverflowError):
                return Err(OutOfDomain(self.value, value))
            if not math.isfinite(number) or abs(number) > self.max_value:
                return Err(OutOfDomain(self.value, value))
            return Ok(self.coerce(number))
        try:
            number = operator.index(value)
        except TypeError:
            return Err(OutOfDomain(self.value, value))
        if not self.min_value <= number <= self.max_value:
            return Err(OutOfDomain(self.value, value))
        return Ok(number)

    def bounds(self, a: Any, b: Any) -> Result[Bounds, OutOfDomain]:
        """Validate two bounds given in either order and normalize them."""
        first = self.check(a)
        if first.is_err():
            return first
        second = self.check(b)
        if second.is_err():
            return second
        lo, hi = first.value, second.value
        if hi < lo:
            lo, hi = hi, lo
        return Ok(Bounds(self, lo, hi))


_WIDTHS = {
    Domain.INT8: 8,
    Domain.INT16: 16,
    Domain.INT32: 32,
    Domain.INT64: 64,
    Domain.FLOAT32: 32,
    Domain.FLOAT64: 64,
}


class Bounds(msgspec.Struct, frozen=True, gc=False):
    """Normalized inclusive range ``[lo, hi]`` within a domain."""

    domain: Domain
    lo: int | float
    hi: int | float

    @property
    def is_full_domain(self) -> bool:
        """True for an integer range spanning the whole domain.

        Such a range is sampled from raw bits; ``hi - lo + 1`` is never
        formed for it.
        """
        return (
            not self.domain.is_float
            and self.lo == self.domain.min_value
            and self.hi == self.domain.max_value
        )

    @property
    def size(self) -> int:
        """Number of distinct values of the domain inside ``[lo, hi]``."""
        if self.domain.is_float:
            width = self.domain.bits
            return float_ordinal(self.hi, width) - float_ordinal(self.lo, width) + 1
        if self.is_full_domain:
            return 1 << self.domain.bits
        return self.hi - self.lo + 1
