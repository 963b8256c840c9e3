"""Pytest configuration and shared fixtures for klaw-numgen tests."""

from __future__ import annotations

import random

import pytest

from klaw_numgen import reset_config
from klaw_numgen._logging import clear_log_hooks


@pytest.fixture
def rng() -> random.Random:
    """Seeded source so statistical assertions are reproducible."""
    return random.Random(20240601)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop config, env overrides and log hooks around every test."""
    monkeypatch.delenv('KLAW_NUMGEN_MAX_SEQUENCE_LENGTH', raising=False)
    monkeypatch.delenv('KLAW_NUMGEN_EMPTY_BUCKET', raising=False)
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


class FixedSource:
    """Source replaying a fixed list of unit floats, cycling when exhausted."""

    def __init__(self, *values: float) -> None:
        self._values = values
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def fixed_source():
    """Factory for FixedSource instances."""
    return FixedSource
