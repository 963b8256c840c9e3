"""Error types: dual struct+exception for Result and raise-based code.

Generators return the struct variants inside ``Err``. Each struct converts
to its exception with ``to_exception()`` and back with ``to_struct()``.
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'EmptyInput',
    'EmptyInputError',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidWeight',
    'InvalidWeightError',
    'NumgenError',
    'OutOfDomain',
    'OutOfDomainError',
    'RangeTooLarge',
    'RangeTooLargeError',
    'RangeTooSmall',
    'RangeTooSmallError',
]


class NumgenError(Exception):
    """Base class for the exception variants."""


# --- Sequence Errors ---


class InvalidLength(msgspec.Struct, frozen=True, gc=False):
    """Requested sequence length is negative - struct variant."""

    length: int

    def to_exception(self) -> InvalidLengthError:
        """Convert to exception for raise-based code."""
        return InvalidLengthError(self.length)


class InvalidLengthError(NumgenError):
    """Requested sequence length is negative - exception variant."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f'Sequence length must be non-negative, got {length}')

    def to_struct(self) -> InvalidLength:
        """Convert to struct for Result-based code."""
        return InvalidLength(self.length)


class RangeTooSmall(msgspec.Struct, frozen=True, gc=False):
    """Range holds fewer distinct values than requested - struct variant."""

    length: int
    size: int

    def to_exception(self) -> RangeTooSmallError:
        """Convert to exception for raise-based code."""
        return RangeTooSmallError(self.length, self.size)


class RangeTooSmallError(NumgenError):
    """Range holds fewer distinct values than requested - exception variant."""

    def __init__(self, length: int, size: int) -> None:
        self.length = length
        self.size = size
        super().__init__(f'Cannot draw {length} distinct values from a range of {size}')

    def to_struct(self) -> RangeTooSmall:
        """Convert to struct for Result-based code."""
        return RangeTooSmall(self.length, self.size)


class RangeTooLarge(msgspec.Struct, frozen=True, gc=False):
    """Range is too large to enumerate as one sequence - struct variant."""

    size: int
    limit: int

    def to_exception(self) -> RangeTooLargeError:
        """Convert to exception for raise-based code."""
        return RangeTooLargeError(self.size, self.limit)


class RangeTooLargeError(NumgenError):
    """Range is too large to enumerate as one sequence - exception variant."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f'Range of {size} values exceeds the sequence limit of {limit}')

    def to_struct(self) -> RangeTooLarge:
        """Convert to struct for Result-based code."""
        return RangeTooLarge(self.size, self.limit)


# --- Domain Errors ---


class OutOfDomain(msgspec.Struct, frozen=True, gc=False):
    """Bound is not representable in the domain - struct variant."""

    domain: str
    value: Any

    def to_exception(self) -> OutOfDomainError:
        """Convert to exception for raise-based code."""
        return OutOfDomainError(self.domain, self.value)


class OutOfDomainError(NumgenError):
    """Bound is not representable in the domain - exception variant."""

    def __init__(self, domain: str, value: Any) -> None:
        self.domain = domain
        self.value = value
        super().__init__(f'{value!r} is not a valid {domain} bound')

    def to_struct(self) -> OutOfDomain:
        """Convert to struct for Result-based code."""
        return OutOfDomain(self.domain, self.value)


# --- Pick Errors ---


class EmptyInput(msgspec.Struct, frozen=True, gc=False):
    """Nothing to pick from - struct variant."""

    def to_exception(self) -> EmptyInputError:
        """Convert to exception for raise-based code."""
        return EmptyInputError()


class EmptyInputError(NumgenError):
    """Nothing to pick from - exception variant."""

    def __init__(self) -> None:
        super().__init__('Array is empty')

    def to_struct(self) -> EmptyInput:
        """Convert to struct for Result-based code."""
        return EmptyInput()


class InvalidWeight(msgspec.Struct, frozen=True, gc=False):
    """Weight is NaN or infinite - struct variant."""

    index: int
    weight: float

    def to_exception(self) -> InvalidWeightError:
        """Convert to exception for raise-based code."""
        return InvalidWeightError(self.index, self.weight)


class InvalidWeightError(NumgenError):
    """Weight is NaN or infinite - exception variant."""

    def __init__(self, index: int, weight: float) -> None:
        self.index = index
        self.weight = weight
        super().__init__(f'Weight at index {index} is not finite: {weight!r}')

    def to_struct(self) -> InvalidWeight:
        """Convert to struct for Result-based code."""
        return InvalidWeight(self.index, self.weight)
