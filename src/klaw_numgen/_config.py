"""Library configuration: EmptyBucket policy, NumgenConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from klaw_numgen._logging import configure_logging

__all__ = [
    'DEFAULT_MAX_SEQUENCE_LENGTH',
    'EmptyBucket',
    'NumgenConfig',
    'get_config',
    'init',
    'reset_config',
]

DEFAULT_MAX_SEQUENCE_LENGTH = 2**31 - 1


class EmptyBucket(Enum):
    """What ``weighted_pick`` does when the selected bucket has no indices.

    Buckets are empty only when there are more weights than array elements.
    """

    NEXT = 'next'
    """Forward the selection to the next non-empty bucket."""

    NOTHING = 'nothing'
    """Return ``Nothing``."""


@dataclass(frozen=True)
class NumgenConfig:
    """Configuration for klaw-numgen.

    Attributes:
        max_sequence_length: Longest sequence ``random_permutation`` will
            enumerate.
        empty_bucket: Resolution for a selected empty weight bucket.
        log_level: Logging level configured by ``init``. None = leave
            logging alone.
    """

    max_sequence_length: int = DEFAULT_MAX_SEQUENCE_LENGTH
    empty_bucket: EmptyBucket = EmptyBucket.NEXT
    log_level: str | None = None


# Set by init(); None means "derive from the environment on demand".
_config: NumgenConfig | None = None


def _detect_max_sequence_length() -> int:
    """Read KLAW_NUMGEN_MAX_SEQUENCE_LENGTH, falling back to the default."""
    raw = os.environ.get('KLAW_NUMGEN_MAX_SEQUENCE_LENGTH', '').strip()
    if not raw:
        return DEFAULT_MAX_SEQUENCE_LENGTH
    try:
        return max(1, int(raw))
    except ValueError:
        logging.warning(
            "Invalid KLAW_NUMGEN_MAX_SEQUENCE_LENGTH value '%s', defaulting to %d",
            raw,
            DEFAULT_MAX_SEQUENCE_LENGTH,
        )
        return DEFAULT_MAX_SEQUENCE_LENGTH


def _detect_empty_bucket() -> EmptyBucket:
    """Read KLAW_NUMGEN_EMPTY_BUCKET ("next" or "nothing")."""
    raw = os.environ.get('KLAW_NUMGEN_EMPTY_BUCKET', '').strip().lower()
    if not raw:
        return EmptyBucket.NEXT
    try:
        return EmptyBucket(raw)
    except ValueError:
        logging.warning("Unknown KLAW_NUMGEN_EMPTY_BUCKET value '%s', defaulting to next", raw)
        return EmptyBucket.NEXT


def init(
    max_sequence_length: int | None = None,
    empty_bucket: EmptyBucket | str | None = None,
    log_level: str | None = None,
) -> NumgenConfig:
    """Set the library configuration.

    Unspecified settings come from the environment, then the defaults.

    Args:
        max_sequence_length: Permutation ceiling, clamped to at least 1.
        empty_bucket: EmptyBucket enum or its string value.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The NumgenConfig that was set.

    Example:
        ```python
        import klaw_numgen

        klaw_numgen.init(empty_bucket='nothing', log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if max_sequence_length is None:
        resolved_length = _detect_max_sequence_length()
    else:
        resolved_length = max(1, max_sequence_length)

    if empty_bucket is None:
        resolved_bucket = _detect_empty_bucket()
    elif isinstance(empty_bucket, str):
        resolved_bucket = EmptyBucket(empty_bucket.lower())
    else:
        resolved_bucket = empty_bucket

    _config = NumgenConfig(
        max_sequence_length=resolved_length,
        empty_bucket=resolved_bucket,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> NumgenConfig:
    """Return the configuration set by ``init``.

    The generators work without ``init``; in that case the environment and
    defaults are read on each call.
    """
    if _config is None:
        return NumgenConfig(
            max_sequence_length=_detect_max_sequence_length(),
            empty_bucket=_detect_empty_bucket(),
        )
    return _config


def reset_config() -> None:
    """Forget the configuration set by ``init``."""
    global _config  # noqa: PLW0603
    _config = None
