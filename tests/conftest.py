"""Shared pytest fixtures for all test types."""

import random

import pytest

from src.lib.config import reset_settings


class ScriptedRandom:
    """Random source that replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, draws: list[int]):
        self._draws = list(draws)
        self._index = 0
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self._draws[self._index % len(self._draws)]
        self._index += 1
        return value


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear cached settings and showcase env vars around every test."""
    for name in ("FPDEMO_SERVICE_CALLS", "FPDEMO_SEED", "FPDEMO_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def seeded_rng() -> random.Random:
    """A deterministic generator."""
    return random.Random(1234)


@pytest.fixture
def always_even() -> ScriptedRandom:
    """Random source whose every draw is even (service succeeds)."""
    return ScriptedRandom([2])


@pytest.fixture
def always_odd() -> ScriptedRandom:
    """Random source whose every draw is odd (service fails)."""
    return ScriptedRandom([7])


@pytest.fixture
def scripted_random():
    """Factory for random sources that replay the given draws."""
    return ScriptedRandom
