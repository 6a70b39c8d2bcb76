"""Single-frame pointer pulse feeding the predator target."""

from typing import Optional, Tuple

# Fraction of the domain half-width the pointer can reach
PREDATOR_REACH = 0.5


class InteractionSignal:
    """
    Latest pointer sample in normalized device coordinates, consumed once.

    The input side calls ``set_pointer`` on every move event; the frame
    scheduler calls ``consume`` once per tick. A sample is therefore seen
    by exactly one Velocity Update pass.
    """

    def __init__(self):
        self._sample: Optional[Tuple[float, float]] = None

    def set_pointer(self, x: float, y: float):
        """Record a pointer position (NDC, +y up). No range validation."""
        self._sample = (float(x), float(y))

    def clear(self):
        self._sample = None

    def peek(self) -> Optional[Tuple[float, float]]:
        """Latest sample without consuming it."""
        return self._sample

    def consume(self) -> Optional[Tuple[float, float]]:
        """Return the latest sample (or None) and clear it."""
        sample, self._sample = self._sample, None
        return sample


def pixel_to_ndc(px: float, py: float, half_x: float, half_y: float) -> Tuple[float, float]:
    """Window pixel (origin top-left) to NDC with +y up."""
    return (px - half_x) / half_x, -(py - half_y) / half_y


def predator_world_position(sample: Tuple[float, float], bounds: float) -> Tuple[float, float, float]:
    """Map an NDC sample onto the z=0 plane of the simulation domain."""
    x, y = sample
    return PREDATOR_REACH * x * bounds, PREDATOR_REACH * y * bounds, 0.0
