"""Frame scheduler: orders the two kernels and promotes the new generation."""

from typing import NamedTuple, Optional, Tuple

from . import kernels
from .errors import FrameAbortedError
from .interaction import InteractionSignal, predator_world_position
from .params import Parameters
from .store import AgentStateStore, Generation


class FrameState(NamedTuple):
    """What the renderer gets after a tick."""
    frame: int
    clock: float
    generation: Generation


class FrameScheduler:
    """
    Sole writer of the agent state store.

    ``tick(dt)``: velocity kernel (current -> next velocities), barrier,
    integration kernel (current positions + next velocities -> next
    positions), barrier, swap. Any failure in between discards the frame.
    """

    def __init__(self, params: Parameters, store: AgentStateStore,
                 signal: Optional[InteractionSignal] = None):
        self.params = params
        self.store = store
        self.signal = signal if signal is not None else InteractionSignal()
        self.frame = 0
        self.clock = 0.0
        self.last_predator: Optional[Tuple[float, float, float]] = None

    def clamp_dt(self, dt: float) -> float:
        """Clamp elapsed time into [0, max_dt] to avoid blow-ups after a stall."""
        dt = float(dt)
        if dt != dt or dt < 0.0:
            return 0.0
        return min(dt, self.params.max_dt)

    def tick(self, dt: float) -> FrameState:
        """Advance one generation."""
        dt = self.clamp_dt(dt)
        params = self.params

        sample = self.signal.consume()
        if sample is None:
            predator = None
            has_predator, px, py, pz = False, 0.0, 0.0, 0.0
        else:
            predator = predator_world_position(sample, params.bounds)
            has_predator = True
            px, py, pz = predator

        current = self.store.read()
        next_positions, next_velocities = self.store.begin_frame()
        try:
            kernels.update_velocities(
                current.positions,
                current.velocities,
                next_velocities,
                params.separation,
                params.alignment,
                params.cohesion,
                dt,
                has_predator,
                px, py, pz,
                params.count
            )
            kernels.integrate_positions(
                current.positions,
                next_velocities,
                next_positions,
                params.bounds,
                dt,
                params.count
            )
        except Exception as e:
            self.store.discard()
            print(f"[Starlings] Frame {self.frame + 1} aborted: {e}")
            raise FrameAbortedError(f"frame {self.frame + 1} aborted: {e}") from e
        except BaseException:
            self.store.discard()
            raise

        self.store.swap()
        self.frame += 1
        self.clock += dt
        self.last_predator = predator
        return self.state()

    def state(self) -> FrameState:
        return FrameState(self.frame, self.clock, self.store.read())
