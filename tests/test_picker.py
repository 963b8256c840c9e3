"""Tests for weighted_pick()."""

from __future__ import annotations

import math
import random
from collections import Counter
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_numgen import (
    EmptyBucket,
    EmptyInput,
    Err,
    InvalidWeight,
    Nothing,
    Ok,
    Some,
    configure_logging,
    init,
    weighted_pick,
)
from klaw_numgen._logging import add_log_hook
from klaw_numgen.picker import _select_bucket, bucket_span
from tests.strategies import weight_vectors


class TestBucketSpan:
    """Tests for the index partitioning."""

    def test_even_split(self) -> None:
        assert [bucket_span(i, 10, 2) for i in range(2)] == [range(0, 5), range(5, 10)]

    def test_uneven_split(self) -> None:
        assert [list(bucket_span(i, 10, 3)) for i in range(3)] == [
            [0, 1, 2],
            [3, 4, 5],
            [6, 7, 8, 9],
        ]

    def test_one_bucket_per_element(self) -> None:
        assert [bucket_span(i, 4, 4) for i in range(4)] == [range(i, i + 1) for i in range(4)]

    def test_more_buckets_than_elements(self) -> None:
        spans = [bucket_span(i, 2, 5) for i in range(5)]
        assert [len(s) for s in spans] == [0, 0, 1, 0, 1]

    @given(count=st.integers(1, 500), buckets=st.integers(1, 500))
    def test_partition_covers_indices(self, count: int, buckets: int) -> None:
        indices = [i for b in range(buckets) for i in bucket_span(b, count, buckets)]
        assert indices == list(range(count))
        assert len(bucket_span(buckets - 1, count, buckets)) > 0


class TestEdgeCases:
    """Tests for the defined non-random outcomes."""

    def test_empty_array(self) -> None:
        assert weighted_pick([], [1.0, 2.0]) == Err(EmptyInput())
        assert weighted_pick([]) == Err(EmptyInput())

    @given(weights=st.lists(st.floats(allow_nan=False), max_size=5))
    def test_single_element_always_returned(self, weights: list[float]) -> None:
        assert weighted_pick(['x'], weights) == Ok(Some('x'))

    def test_single_element_ignores_zero_weights(self) -> None:
        assert weighted_pick(['x'], [0, 0, 0]) == Ok(Some('x'))

    def test_all_zero_weights(self, rng: random.Random) -> None:
        for _ in range(100):
            assert weighted_pick([1, 2, 3], [0, 0, 0], source=rng) == Ok(Nothing)

    def test_negative_zero_weights(self, rng: random.Random) -> None:
        assert weighted_pick([1, 2], [-0.0, 0.0], source=rng) == Ok(Nothing)

    @pytest.mark.parametrize('weight', [math.inf, -math.inf])
    def test_non_finite_weight(self, weight: float) -> None:
        assert weighted_pick([1, 2, 3], [1.0, weight]) == Err(InvalidWeight(1, weight))

    def test_nan_weight(self) -> None:
        picked = weighted_pick([1, 2, 3], [math.nan])
        assert picked.is_err()
        assert picked.error.index == 0

    def test_weights_are_not_mutated(self, rng: random.Random) -> None:
        weights = [-1.0, 2.0]
        weighted_pick(['a', 'b'], weights, source=rng)
        assert weights == [-1.0, 2.0]

    def test_selection_of_none_is_some(self, rng: random.Random) -> None:
        assert weighted_pick([None, None], source=rng) == Ok(Some(None))


class TestSelection:
    """Tests for which elements get picked."""

    def test_no_weights_is_uniform(self, rng: random.Random) -> None:
        counts = Counter(weighted_pick('abcd', source=rng).unwrap().unwrap() for _ in range(20_000))
        for letter in 'abcd':
            assert 4500 < counts[letter] < 5500

    def test_empty_weights_is_uniform(self, rng: random.Random) -> None:
        seen = {weighted_pick([1, 2, 3], [], source=rng).unwrap().unwrap() for _ in range(300)}
        assert seen == {1, 2, 3}

    def test_zero_weight_bucket_never_chosen(self, rng: random.Random) -> None:
        for _ in range(2000):
            assert weighted_pick([1, 2, 3, 4], [0, 1], source=rng).unwrap().unwrap() in {3, 4}

    def test_sign_is_ignored(self, rng: random.Random) -> None:
        counts = Counter(
            weighted_pick([0, 1], [-1, 3], source=rng).unwrap().unwrap() for _ in range(20_000)
        )
        assert counts[0] / 20_000 == pytest.approx(0.25, abs=0.02)

    def test_bucket_frequencies_follow_weights(self, rng: random.Random) -> None:
        array = list(range(12))
        weights = [1.0, 2.0, 5.0]
        trials = 40_000
        counts = Counter()
        for _ in range(trials):
            index = weighted_pick(array, weights, source=rng).unwrap().unwrap()
            counts[index // 4] += 1
        for bucket, weight in enumerate(weights):
            assert counts[bucket] / trials == pytest.approx(weight / sum(weights), abs=0.015)

    def test_uniform_within_bucket(self, rng: random.Random) -> None:
        counts = Counter(
            weighted_pick(list(range(8)), [0, 1], source=rng).unwrap().unwrap()
            for _ in range(20_000)
        )
        assert set(counts) == {4, 5, 6, 7}
        for index in (4, 5, 6, 7):
            assert 4500 < counts[index] < 5500

    def test_large_weights_do_not_overflow(self, rng: random.Random) -> None:
        seen = {
            weighted_pick([1, 2], [1e308, 1e308], source=rng).unwrap().unwrap() for _ in range(200)
        }
        assert seen == {1, 2}

    def test_tiny_weights_keep_proportions(self, rng: random.Random) -> None:
        trials = 20_000
        counts = Counter(
            weighted_pick(['a', 'b'], [1e-305, 3e-305], source=rng).unwrap().unwrap()
            for _ in range(trials)
        )
        assert counts['b'] / trials == pytest.approx(0.75, abs=0.02)

    def test_subnormal_weights(self, rng: random.Random) -> None:
        seen = {
            weighted_pick([1, 2], [5e-324, 5e-324], source=rng).unwrap().unwrap()
            for _ in range(200)
        }
        assert seen == {1, 2}

    @given(weights=weight_vectors, count=st.integers(1, 30), seed=st.integers(0, 2**32))
    def test_always_some_element(self, weights: list[float], count: int, seed: int) -> None:
        array = list(range(count))
        picked = weighted_pick(array, weights, source=random.Random(seed)).unwrap()
        assert picked.is_some()
        assert picked.unwrap() in array


class TestEmptyBuckets:
    """Tests for buckets left without indices when weights outnumber elements."""

    def test_forwarded_to_next_bucket(self, fixed_source) -> None:
        # buckets over 2 elements with 5 weights: [], [], [0], [], [1]
        # r = 0.1 * 100000 lands in bucket 0, which forwards to bucket 2
        picked = weighted_pick(['a', 'b'], [1, 1, 1, 1, 1], source=fixed_source(0.1, 0.0))
        assert picked == Ok(Some('a'))

    def test_forwarding_reaches_last_bucket(self, fixed_source) -> None:
        # r = 0.7 * 100000 lands in bucket 3, forwarded to bucket 4
        picked = weighted_pick(['a', 'b'], [1, 1, 1, 1, 1], source=fixed_source(0.7, 0.0))
        assert picked == Ok(Some('b'))

    def test_nothing_policy(self, fixed_source) -> None:
        init(empty_bucket=EmptyBucket.NOTHING)
        picked = weighted_pick(['a', 'b'], [1, 1, 1, 1, 1], source=fixed_source(0.1, 0.0))
        assert picked == Ok(Nothing)

    def test_nothing_policy_non_empty_bucket(self, fixed_source) -> None:
        init(empty_bucket='nothing')
        picked = weighted_pick(['a', 'b'], [1, 1, 1, 1, 1], source=fixed_source(0.5, 0.0))
        assert picked == Ok(Some('a'))

    def test_many_weights_few_elements(self, rng: random.Random) -> None:
        seen = {
            weighted_pick([1, 2, 3], [1.0] * 50, source=rng).unwrap().unwrap() for _ in range(500)
        }
        assert seen == {1, 2, 3}


class TestRoundingFallback:
    """Tests for a draw that the cumulative weights never exceed."""

    def test_last_positive_bucket_is_chosen(self, fixed_source) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        # the stated total overshoots the weights, so the running sum tops out at 75000
        bucket = _select_bucket([1.0, 2.0, 0.0], 4.0, fixed_source(1.0 - 2**-53))

        assert bucket == 1
        events = [e for e in received if e.get('event') == 'weighted_pick_rounding_fallback']
        assert len(events) == 1
        assert events[0]['bucket'] == 1
        assert events[0]['cumulative'] == 75000.0

    def test_ordinary_draw_is_not_a_fallback(self, fixed_source) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        assert _select_bucket([1.0, 2.0, 0.0], 3.0, fixed_source(0.5)) == 1
        assert not any(e.get('event') == 'weighted_pick_rounding_fallback' for e in received)
