"""
Pytest fixtures for phrasegen tests
"""

import os
import pytest
from typing import AsyncGenerator, List

# Set test environment before imports
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "6000")
os.environ.setdefault("RATE_LIMIT_BURST", "1000")
os.environ.setdefault("PASSPHRASE_LENGTHS_RAW", "12,16,18,20,24,28,32")

from httpx import AsyncClient, ASGITransport
from phrasegen.main import app
from phrasegen.services.batch import PassphraseBatch, get_batch


class ScriptedRandom:
    """
    Stand-in for random.Random that replays scripted values.

    floats feed random(), choices feed choice(), digits feed randrange().
    shuffle() keeps the order unless reverse is set.
    """

    def __init__(self, floats=(), choices=(), digits=(), reverse=False):
        self.floats = list(floats)
        self.choices = list(choices)
        self.digits = list(digits)
        self.reverse = reverse

    def random(self) -> float:
        return self.floats.pop(0)

    def choice(self, seq):
        value = self.choices.pop(0)
        assert value in seq
        return value

    def randrange(self, stop: int) -> int:
        value = self.digits.pop(0)
        assert 0 <= value < stop
        return value

    def shuffle(self, x: List) -> None:
        if self.reverse:
            x.reverse()

    def exhausted(self) -> bool:
        return not (self.floats or self.choices or self.digits)


class CountingGenerator:
    """Generator stub returning a new, recognisable value per call."""

    def __init__(self):
        self.calls = 0

    def generate(self, target_length: int) -> str:
        self.calls += 1
        return f"pass{target_length}n{self.calls}"[:target_length]


@pytest.fixture
def scripted_random():
    """Factory for scripted random generators."""
    return ScriptedRandom


@pytest.fixture
def phonetic_words() -> List[str]:
    """Fixed 12-word draw for reproducible passphrases."""
    return [
        "alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
        "golf", "hotel", "india", "juliett", "kilo", "lima",
    ]


@pytest.fixture
def counting_generator() -> CountingGenerator:
    return CountingGenerator()


@pytest.fixture
def stub_batch(counting_generator: CountingGenerator) -> PassphraseBatch:
    """Small batch backed by the counting generator."""
    return PassphraseBatch(lengths=(12, 20), generator=counting_generator)


@pytest.fixture
async def client(stub_batch: PassphraseBatch) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    app.dependency_overrides[get_batch] = lambda: stub_batch
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.pop(get_batch, None)
