import os
import random
import sys
from pathlib import Path

import pytest

# pygame must never try to open a real window in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def pytest_configure():
    src = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(src))


class FakeClock:
    """Millisecond clock the test moves by hand."""

    def __init__(self, ms=0):
        self.ms = ms

    def __call__(self):
        return self.ms

    def advance(self, ms):
        self.ms += ms


@pytest.fixture
def clock():
    return FakeClock(1_000)


@pytest.fixture
def rng():
    return random.Random(1234)
