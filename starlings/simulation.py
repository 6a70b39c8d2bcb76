"""Starlings simulation: parameter set, state store, interaction, scheduler."""

from typing import Optional

from . import kernels
from .errors import SimulationStoppedError
from .interaction import InteractionSignal
from .params import Parameters
from .scheduler import FrameScheduler, FrameState
from .store import AgentStateStore, Generation


class Starlings:
    """
    Murmuration simulation owned by one caller (usually the viewer).

    Accepts either a ready ``Parameters`` or keyword options merged over
    ``config.starlings.STARLINGS``.
    """

    def __init__(self, params: Optional[Parameters] = None, warmup: bool = True, **options):
        if params is None:
            params = Parameters.from_options(**options)
        elif options:
            raise TypeError("pass either params or keyword options, not both")
        self.params = params

        print(f"[Starlings] Starting with {params.count:,} birds "
              f"({params.resolution}x{params.resolution} grid)")

        # Raises SimulationInitError if the dual buffers cannot be provisioned
        self.store = AgentStateStore.randomized(params)
        self.signal = InteractionSignal()
        self.scheduler = FrameScheduler(params, self.store, self.signal)

        if warmup:
            kernels.warmup()

        print("[Starlings] Simulation initialized successfully")

    @property
    def bird_count(self) -> int:
        return self.params.count

    @property
    def running(self) -> bool:
        return not self.store.released

    @property
    def frame(self) -> int:
        return self.scheduler.frame

    def _check_running(self):
        if not self.running:
            raise SimulationStoppedError("simulation has been stopped")

    def set_pointer(self, x: float, y: float):
        """Feed one pointer sample (NDC) for the next tick."""
        self.signal.set_pointer(x, y)

    def tick(self, dt: float) -> FrameState:
        """Advance the flock by one frame of ``dt`` seconds."""
        self._check_running()
        return self.scheduler.tick(dt)

    def state(self) -> FrameState:
        self._check_running()
        return self.scheduler.state()

    def current(self) -> Generation:
        """Read-only current generation; re-fetch every frame."""
        self._check_running()
        return self.store.read()

    def stop(self):
        """Release the agent buffers."""
        if self.running:
            self.store.release()
            self.signal.clear()
            print(f"[Starlings] Stopped after {self.scheduler.frame:,} frames")
