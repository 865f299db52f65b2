import random

import pytest

from ulys import create_app


class FixedSource:
    """A random source that always hands out the same bits."""

    def __init__(self, bits):
        self.bits = bits
        self.calls = 0

    def getrandbits(self, k):
        self.calls += 1
        return self.bits & ((1 << k) - 1)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def saturated_source():
    return FixedSource((1 << 64) - 1)


@pytest.fixture()
def app():
    return create_app("testing")


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def fixed_source():
    return FixedSource
