"""Exceptions raised by the starlings simulation core."""


class SimulationInitError(RuntimeError):
    """The agent state store could not be provisioned."""


class FrameAbortedError(RuntimeError):
    """A kernel failed mid-tick; the previous generation is still current."""


class SimulationStoppedError(RuntimeError):
    """The simulation was used after ``stop()`` released its buffers."""
