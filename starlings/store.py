"""Double-buffered agent state store (two generations, one current)."""

from typing import NamedTuple, Tuple

import numpy as np

from .agent import AgentRecord
from .errors import SimulationInitError, SimulationStoppedError
from .params import Parameters


def _readonly(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class Generation(NamedTuple):
    """Read-only snapshot of every agent at one tick."""
    slot: int
    positions: np.ndarray
    velocities: np.ndarray

    def __len__(self) -> int:
        return self.positions.shape[0]

    def record(self, index: int) -> AgentRecord:
        """Copy one agent out of the snapshot."""
        return AgentRecord(self.positions[index].copy(), self.velocities[index].copy())


class AgentStateStore:
    """
    Two physical generations of agent records with a "current" slot index.

    Consumers only ever see the current generation through read-only views.
    The scheduler opens a frame with ``begin_frame()``, the kernels fill the
    other slot, and ``swap()`` promotes it. ``discard()`` closes a failed
    frame without promoting anything.
    """

    def __init__(self, count: int):
        self.count = int(count)
        try:
            # (slot, agent, xyz)
            self._positions = self._allocate(self.count)
            self._velocities = self._allocate(self.count)
        except (MemoryError, ValueError) as e:
            raise SimulationInitError(
                f"Unable to allocate agent buffers for {count} agents: {e}"
            ) from e
        self._current = 0
        self._in_frame = False

    @staticmethod
    def _allocate(count: int) -> np.ndarray:
        if count < 1:
            raise ValueError("agent count must be positive")
        return np.zeros((2, count, 3), dtype=np.float64)

    @classmethod
    def randomized(cls, params: Parameters) -> "AgentStateStore":
        """Allocate a store and fill generation 0 with the initial flock."""
        store = cls(params.count)
        rng = np.random.default_rng(params.seed)
        positions = rng.random((params.count, 3)) * 100.0
        velocities = (rng.random((params.count, 3)) - 0.5) * 10.0
        store.load(positions, velocities)
        return store

    # ------------------------------------------------------------------
    # Consumer side
    # ------------------------------------------------------------------

    @property
    def released(self) -> bool:
        return self._positions is None

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    def _check_alive(self):
        if self.released:
            raise SimulationStoppedError("agent state store has been released")

    def read(self) -> Generation:
        """Read-only view of the current generation."""
        self._check_alive()
        slot = self._current
        return Generation(
            slot,
            _readonly(self._positions[slot]),
            _readonly(self._velocities[slot]),
        )

    # ------------------------------------------------------------------
    # Writer side (frame scheduler only)
    # ------------------------------------------------------------------

    def load(self, positions: np.ndarray, velocities: np.ndarray):
        """Overwrite both generations with the given state (no frame open)."""
        self._check_alive()
        if self._in_frame:
            raise RuntimeError("cannot load state while a frame is in progress")
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        shape = (self.count, 3)
        if positions.shape != shape or velocities.shape != shape:
            raise ValueError(f"state arrays must have shape {shape}")
        self._positions[:] = positions
        self._velocities[:] = velocities

    def begin_frame(self) -> Tuple[np.ndarray, np.ndarray]:
        """Open a frame and return writable (positions, velocities) of the next generation."""
        self._check_alive()
        if self._in_frame:
            raise RuntimeError("a frame is already in progress")
        self._in_frame = True
        slot = 1 - self._current
        return self._positions[slot], self._velocities[slot]

    def write_next(self, index: int, record: AgentRecord):
        """Write one agent into the non-current generation."""
        self._check_alive()
        if not self._in_frame:
            raise RuntimeError("write_next is only valid during an in-progress frame")
        if not 0 <= index < self.count:
            raise IndexError(f"agent index {index} out of range for {self.count} agents")
        slot = 1 - self._current
        self._positions[slot, index] = record.position
        self._velocities[slot, index] = record.velocity

    def swap(self):
        """Promote the written generation to current."""
        self._check_alive()
        if not self._in_frame:
            raise RuntimeError("swap() called without an in-progress frame")
        self._current = 1 - self._current
        self._in_frame = False

    def discard(self):
        """Close the frame without promoting partial writes."""
        self._in_frame = False

    def release(self):
        """Drop both generations."""
        self._positions = None
        self._velocities = None
        self._in_frame = False
