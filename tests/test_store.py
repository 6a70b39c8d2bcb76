import numpy as np
import pytest

from starlings.agent import AgentRecord
from starlings.errors import SimulationInitError, SimulationStoppedError
from starlings.params import Parameters
from starlings.store import AgentStateStore


def _store(count=4):
    store = AgentStateStore(count)
    positions = np.arange(count * 3, dtype=np.float64).reshape(count, 3)
    store.load(positions, -positions)
    return store


def test_randomized_initial_state_ranges():
    params = Parameters.from_options(resolution=16, seed=42)
    store = AgentStateStore.randomized(params)
    current = store.read()

    assert len(current) == 256
    assert current.positions.min() >= 0.0
    assert current.positions.max() < 100.0
    assert current.velocities.min() >= -5.0
    assert current.velocities.max() <= 5.0


def test_randomized_is_reproducible_with_seed():
    params = Parameters.from_options(resolution=4, seed=9)
    a = AgentStateStore.randomized(params).read()
    b = AgentStateStore.randomized(params).read()
    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.velocities, b.velocities)


def test_current_generation_is_read_only():
    store = _store()
    current = store.read()
    with pytest.raises(ValueError):
        current.positions[0, 0] = 1.0
    with pytest.raises(ValueError):
        current.velocities[0, 0] = 1.0


def test_writes_invisible_until_swap():
    store = _store()
    before = store.read()

    store.begin_frame()
    store.write_next(1, AgentRecord((7.0, 8.0, 9.0), (1.0, 1.0, 1.0)))
    np.testing.assert_array_equal(store.read().positions[1], [3.0, 4.0, 5.0])

    store.swap()
    after = store.read()
    assert after.slot != before.slot
    np.testing.assert_array_equal(after.positions[1], [7.0, 8.0, 9.0])
    assert after.record(1).speed == pytest.approx(np.sqrt(3.0))


def test_discard_keeps_previous_generation():
    store = _store()
    slot = store.read().slot

    positions, velocities = store.begin_frame()
    positions[:] = np.nan
    velocities[:] = np.nan
    store.discard()

    current = store.read()
    assert current.slot == slot
    assert not store.in_frame
    assert np.isfinite(current.positions).all()


def test_write_next_requires_open_frame():
    store = _store()
    with pytest.raises(RuntimeError):
        store.write_next(0, AgentRecord())
    with pytest.raises(RuntimeError):
        store.swap()


def test_write_next_index_out_of_range():
    store = _store()
    store.begin_frame()
    with pytest.raises(IndexError):
        store.write_next(4, AgentRecord())


def test_begin_frame_twice_rejected():
    store = _store()
    store.begin_frame()
    with pytest.raises(RuntimeError):
        store.begin_frame()


def test_load_rejects_wrong_shape():
    store = AgentStateStore(3)
    with pytest.raises(ValueError):
        store.load(np.zeros((2, 3)), np.zeros((3, 3)))


def test_allocation_failure_is_reported(monkeypatch):
    def fail(count):
        raise MemoryError("out of memory")

    monkeypatch.setattr(AgentStateStore, "_allocate", staticmethod(fail))
    with pytest.raises(SimulationInitError):
        AgentStateStore(1024)


def test_release_drops_buffers():
    store = _store()
    store.release()
    assert store.released
    with pytest.raises(SimulationStoppedError):
        store.read()
    with pytest.raises(SimulationStoppedError):
        store.begin_frame()


def test_begin_frame_returns_next_generation_buffers():
    store = _store()
    positions, velocities = store.begin_frame()
    positions[2] = (1.0, 1.0, 1.0)
    velocities[2] = (0.0, 2.0, 0.0)
    store.swap()
    record = store.read().record(2)
    np.testing.assert_array_equal(record.position, [1.0, 1.0, 1.0])
    assert record.speed == pytest.approx(2.0)
