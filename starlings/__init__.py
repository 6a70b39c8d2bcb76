"""Starlings murmuration simulation core."""

from .params import Parameters
from .agent import AgentRecord
from .store import AgentStateStore, Generation
from .interaction import InteractionSignal
from .scheduler import FrameScheduler, FrameState
from .simulation import Starlings
from .errors import FrameAbortedError, SimulationInitError, SimulationStoppedError

__all__ = [
    "Parameters",
    "AgentRecord",
    "AgentStateStore",
    "Generation",
    "InteractionSignal",
    "FrameScheduler",
    "FrameState",
    "Starlings",
    "FrameAbortedError",
    "SimulationInitError",
    "SimulationStoppedError",
]
