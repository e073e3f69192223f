import matplotlib
matplotlib.use("Agg")

from datetime import datetime

import pytest

from onde_estou.controller import InteractionController
from onde_estou.model.store import MarkerStore


class FrozenClock:
    """毎回同じ時刻を返す（同一ミリ秒での連続作成を再現）"""

    def __init__(self, now=datetime(2024, 5, 17, 9, 30, 15)):
        self.now = now
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.now


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def store(clock):
    return MarkerStore(clock=clock)


@pytest.fixture
def controller(store):
    return InteractionController(store)
