import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from starlings.params import Parameters
from starlings.scheduler import FrameScheduler
from starlings.store import AgentStateStore


def build_scheduler(positions, velocities, **options) -> FrameScheduler:
    """Scheduler over an explicit initial state."""
    positions = np.asarray(positions, dtype=np.float64)
    velocities = np.asarray(velocities, dtype=np.float64)
    params = Parameters.from_options(birds=len(positions), **options)
    store = AgentStateStore(params.count)
    store.load(positions, velocities)
    return FrameScheduler(params, store)


@pytest.fixture
def make_scheduler():
    return build_scheduler


@pytest.fixture
def random_flock():
    def _make(count=64, seed=3, spread=60.0, speed=8.0):
        rng = np.random.default_rng(seed)
        positions = (rng.random((count, 3)) - 0.5) * spread
        velocities = (rng.random((count, 3)) - 0.5) * speed
        return positions, velocities
    return _make
