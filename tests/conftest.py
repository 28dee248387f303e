from datetime import date

import pytest

from bakery_data.generator import DataGenerator
from bakery_data.random_stream import RandomStream
from bakery_data.storage import DemoStore

TODAY = date(2024, 3, 15)


class PlainHasher:
    """Deterministic stand-in for the salted werkzeug hasher."""

    def encode(self, plaintext):
        return f"plain:{plaintext}"


class ScriptedStream:
    """Returns queued values; any unexpected draw fails the test."""

    def __init__(self, doubles=(), ints=()):
        self.doubles = list(doubles)
        self.ints = list(ints)

    def next_double(self):
        return self.doubles.pop(0)

    def next_int(self, n):
        value = self.ints.pop(0)
        assert 0 <= value < n
        return value

    def next_gaussian(self):
        raise AssertionError("unexpected gaussian draw")

    def next_bool(self):
        return self.next_int(2) == 1


def generate(today=TODAY, seed=1, years=2):
    store = DemoStore()
    DataGenerator(store, PlainHasher(), rng=RandomStream(seed), today=today, years_to_include=years).load_data()
    return store


@pytest.fixture
def rng():
    return RandomStream(1)


@pytest.fixture(scope="session")
def generated_store():
    return generate()
