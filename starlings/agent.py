"""Single agent record with position and velocity."""

import numpy as np
from dataclasses import dataclass, field


@dataclass
class AgentRecord:
    """
    One simulated starling.

    Attributes:
        position: 3D position vector
        velocity: 3D velocity vector
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64).reshape(3)
        self.velocity = np.asarray(self.velocity, dtype=np.float64).reshape(3)

    @property
    def speed(self) -> float:
        """Magnitude of the velocity vector."""
        return float(np.linalg.norm(self.velocity))
