"""klaw-numgen: random values, sequences and weighted picks for Python 3.13+.

Values are drawn from fixed-width numeric domains (int8 to int64, float32,
float64) within inclusive ranges given in either order. Fallible operations
return ``Ok``/``Err`` instead of raising.

Flat imports (preferred):
    from klaw_numgen import Domain, random_value, random_sequence, weighted_pick
    from klaw_numgen import Ok, Err, Result, Some, Nothing, Option

Submodule imports (for organization):
    from klaw_numgen.sampler import random_value, full_domain_value
    from klaw_numgen.errors import RangeTooSmall, RangeTooSmallError
    from klaw_numgen.source import UnitSource
"""

# Configuration
from klaw_numgen._config import EmptyBucket, NumgenConfig, get_config, init, reset_config

# Logging
from klaw_numgen._logging import configure_logging, get_logger

# Decorators
from klaw_numgen.decorators import result

# Domains
from klaw_numgen.domain import Bounds, Domain

# Errors - struct and exception variants
from klaw_numgen.errors import (
    EmptyInput,
    EmptyInputError,
    InvalidLength,
    InvalidLengthError,
    InvalidWeight,
    InvalidWeightError,
    NumgenError,
    OutOfDomain,
    OutOfDomainError,
    RangeTooLarge,
    RangeTooLargeError,
    RangeTooSmall,
    RangeTooSmallError,
)

# Option / Result types
from klaw_numgen.option import Nothing, NothingType, Option, Some

# Generators
from klaw_numgen.picker import NORMAL_WEIGHT_SUM, weighted_pick
from klaw_numgen.propagate import Propagate
from klaw_numgen.result import Err, Ok, Result
from klaw_numgen.sampler import full_domain_value, random_value
from klaw_numgen.sequence import random_permutation, random_sequence
from klaw_numgen.source import UnitSource

__all__ = [
    'NORMAL_WEIGHT_SUM',
    'Bounds',
    'Domain',
    'EmptyBucket',
    'EmptyInput',
    'EmptyInputError',
    'Err',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidWeight',
    'InvalidWeightError',
    'Nothing',
    'NothingType',
    'NumgenConfig',
    'NumgenError',
    'Ok',
    'Option',
    'OutOfDomain',
    'OutOfDomainError',
    'Propagate',
    'RangeTooLarge',
    'RangeTooLargeError',
    'RangeTooSmall',
    'RangeTooSmallError',
    'Result',
    'Some',
    'UnitSource',
    'configure_logging',
    'full_domain_value',
    'get_config',
    'get_logger',
    'init',
    'random_permutation',
    'random_sequence',
    'random_value',
    'reset_config',
    'result',
    'weighted_pick',
]
