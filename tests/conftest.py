"""Root conftest for all tests - shared fixtures and configuration."""
import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flappy_gates.config import GameConfig  # noqa: E402
from flappy_gates.session import GameSession  # noqa: E402


class FixedGaps:
    """Generator stand-in that always places the gap top at the same height."""

    def __init__(self, gap_top):
        self.gap_top = gap_top
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.gap_top


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def session(config, rng):
    return GameSession(config, rng=rng)


@pytest.fixture
def hovering_session():
    """Session without gravity whose avatar (y 300..345) sits inside every gap (200..390)."""
    return GameSession(GameConfig(gravity=0), rng=FixedGaps(200))
