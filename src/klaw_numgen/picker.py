"""Weighted selection over contiguous regions of an array.

The array's index space is cut into one equal-width bucket per weight.
A bucket is chosen with probability proportional to its weight, then an
index is drawn uniformly inside it. With one weight per element this is
plain per-element weighting; with fewer weights whole regions share one.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from klaw_numgen._config import EmptyBucket, get_config
from klaw_numgen._logging import get_logger
from klaw_numgen.domain import Bounds, Domain
from klaw_numgen.errors import EmptyInput, InvalidWeight
from klaw_numgen.option import Nothing, Option, Some
from klaw_numgen.result import Err, Ok, Result
from klaw_numgen.sampler import sample_bounds
from klaw_numgen.source import UnitSource, resolve_source

__all__ = ['NORMAL_WEIGHT_SUM', 'bucket_span', 'weighted_pick']

logger = get_logger(__name__)

NORMAL_WEIGHT_SUM = 100000.0
"""Scale the cumulative weights are compared on."""


def bucket_span(bucket: int, count: int, buckets: int) -> range:
    """Indices covered by ``bucket`` when ``count`` indices form ``buckets`` buckets.

    Bucket ``i`` spans ``[floor(i*count/buckets), floor((i+1)*count/buckets))``.
    The last bucket always ends at ``count`` and is never empty.
    """
    return range(bucket * count // buckets, (bucket + 1) * count // buckets)


def _magnitudes(weights: Sequence[float]) -> list[float] | InvalidWeight:
    magnitudes: list[float] = []
    for index, weight in enumerate(weights):
        magnitude = abs(float(weight))
        if not math.isfinite(magnitude):
            return InvalidWeight(index, float(weight))
        magnitudes.append(magnitude)
    return magnitudes


def _select_bucket(magnitudes: list[float], total: float, rng: UnitSource) -> int:
    r = rng.random() * NORMAL_WEIGHT_SUM
    scale = NORMAL_WEIGHT_SUM / total
    cumulative = 0.0
    for bucket, magnitude in enumerate(magnitudes):
        cumulative += magnitude * scale
        if cumulative > r:
            return bucket
    # Rounding left the final sum a hair under r.
    last = max(bucket for bucket, magnitude in enumerate(magnitudes) if magnitude > 0)
    logger.debug('weighted_pick_rounding_fallback', r=r, cumulative=cumulative, bucket=last)
    return last


def weighted_pick[T](
    array: Sequence[T],
    weights: Sequence[float] | None = None,
    *,
    source: UnitSource | None = None,
) -> Result[Option[T], EmptyInput | InvalidWeight]:
    """Pick one element of ``array``, weighting contiguous regions of it.

    Args:
        array: Elements to pick from.
        weights: One weight per bucket; signs are ignored. None or empty
            means a single bucket, i.e. a uniform pick.
        source: Uniform source, the stdlib generator by default.

    Returns:
        ``Ok(Some(element))``; ``Ok(Nothing)`` when every weight is zero, or
        when an empty bucket is chosen under ``EmptyBucket.NOTHING``;
        ``Err(EmptyInput)`` for an empty array; ``Err(InvalidWeight)`` for a
        NaN or infinite weight. A one-element array always yields that
        element, whatever the weights.

    Example:
        ```python
        # indices 0-1 with probability 1/4, indices 2-3 with 3/4
        weighted_pick(['a', 'b', 'c', 'd'], [1, 3])
        ```
    """
    count = len(array)
    if count == 0:
        logger.debug('pick_rejected', error='empty_input')
        return Err(EmptyInput())
    if count == 1:
        return Ok(Some(array[0]))

    if weights is None or len(weights) == 0:
        weights = (1.0,)
    magnitudes = _magnitudes(weights)
    if isinstance(magnitudes, InvalidWeight):
        logger.debug('pick_rejected', error='invalid_weight', index=magnitudes.index)
        return Err(magnitudes)

    total = math.fsum(magnitudes)
    if total == 0:
        return Ok(Nothing)
    if math.isinf(total) or math.isinf(NORMAL_WEIGHT_SUM / total):
        # Every magnitude is finite, so dividing by the largest puts the sum in [1, W].
        peak = max(magnitudes)
        magnitudes = [magnitude / peak for magnitude in magnitudes]
        total = math.fsum(magnitudes)

    rng = resolve_source(source)
    bucket = _select_bucket(magnitudes, total, rng)
    span = bucket_span(bucket, count, len(magnitudes))
    if not span:
        if get_config().empty_bucket is EmptyBucket.NOTHING:
            logger.debug('empty_bucket_selected', bucket=bucket, resolution='nothing')
            return Ok(Nothing)
        selected = bucket
        while not span:
            bucket += 1
            span = bucket_span(bucket, count, len(magnitudes))
        logger.debug('empty_bucket_selected', bucket=selected, resolution='next', target=bucket)

    index = sample_bounds(Bounds(Domain.INT64, span.start, span.stop - 1), rng)
    return Ok(Some(array[index]))
