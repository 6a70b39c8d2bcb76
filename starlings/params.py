"""Immutable per-run parameter set."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from config import starlings as config


@dataclass(frozen=True)
class Parameters:
    """
    Validated simulation parameters, fixed for the lifetime of a run.

    Attributes:
        resolution: Grid side length (agents are addressed as row, col)
        count: Number of simulated agents
        separation: Separation zone distance
        alignment: Alignment zone distance
        cohesion: Cohesion zone distance
        freedom: Randomness factor in [0, 1]; currently not read by any kernel
        bounds: Half-width of the cubic simulation domain
        seed: Seed for the initial-state RNG (None = nondeterministic)
        max_dt: Upper clamp for the elapsed time fed to one tick
    """
    resolution: int = 32
    count: int = 1024
    separation: float = 20.0
    alignment: float = 30.0
    cohesion: float = 20.0
    freedom: float = 0.3
    bounds: float = 500.0
    seed: Optional[int] = None
    max_dt: float = 1.0

    def __post_init__(self):
        if self.resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {self.resolution}")
        if not 1 <= self.count <= self.resolution * self.resolution:
            raise ValueError(
                f"count {self.count} does not fit a {self.resolution}x{self.resolution} grid"
            )
        for name in ("separation", "alignment", "cohesion"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"{name} distance must be finite and >= 0, got {value}")
        if not 0.0 <= self.freedom <= 1.0:
            raise ValueError(f"freedom must be in [0, 1], got {self.freedom}")
        if not math.isfinite(self.bounds) or self.bounds <= 0.0:
            raise ValueError(f"bounds must be finite and > 0, got {self.bounds}")
        if not self.max_dt > 0.0:
            raise ValueError(f"max_dt must be > 0, got {self.max_dt}")

    @classmethod
    def from_options(cls, **options) -> "Parameters":
        """Merge keyword overrides over the configured defaults."""
        merged = dict(config.STARLINGS)
        unknown = set(options) - set(merged)
        if unknown:
            raise TypeError(f"Unknown simulation option(s): {', '.join(sorted(unknown))}")
        merged.update(options)

        resolution = merged["resolution"]
        if isinstance(resolution, bool) or not isinstance(resolution, int):
            raise ValueError(f"resolution must be an integer, got {resolution!r}")

        birds = merged["birds"]
        if isinstance(birds, int) and not isinstance(birds, bool) and birds > 0:
            # Grid must be large enough for the requested bird count
            resolution = math.ceil(math.sqrt(birds))
            count = birds
        else:
            count = resolution * resolution

        return cls(
            resolution=resolution,
            count=count,
            separation=float(merged["separation"]),
            alignment=float(merged["alignment"]),
            cohesion=float(merged["cohesion"]),
            freedom=float(merged["freedom"]),
            bounds=float(merged["bounds"]),
            seed=merged["seed"],
            max_dt=float(merged["max_dt"]),
        )

    @property
    def zone_radius(self) -> float:
        return self.separation + self.alignment + self.cohesion

    @property
    def separation_threshold(self) -> float:
        """Normalized distance where the separation zone ends (0 if degenerate)."""
        z = self.zone_radius
        return self.separation / z if z > 0.0 else 0.0

    @property
    def alignment_threshold(self) -> float:
        """Normalized distance where the alignment zone ends (0 if degenerate)."""
        z = self.zone_radius
        return (self.separation + self.alignment) / z if z > 0.0 else 0.0

    def grid_coordinate(self, index: int) -> Tuple[int, int]:
        """Convert a flat agent index to its (row, col) grid cell."""
        if not 0 <= index < self.count:
            raise IndexError(f"agent index {index} out of range for {self.count} agents")
        return index // self.resolution, index % self.resolution

    def index_of(self, row: int, col: int) -> int:
        """Convert a (row, col) grid cell to a flat agent index."""
        index = row * self.resolution + col
        if not (0 <= col < self.resolution and 0 <= index < self.count):
            raise IndexError(f"grid cell ({row}, {col}) holds no agent")
        return index

    def reference(self, index: int) -> Tuple[float, float]:
        """Normalized texture-style reference (u, v) for an agent."""
        row, col = self.grid_coordinate(index)
        return col / self.resolution, row / self.resolution
