"""
Per-frame agent update kernels, Numba JIT-compiled.

Two stages run over the whole grid every frame:

- ``update_velocities``: each agent's next velocity from the current
  generation (predator pull, center pull, all-pairs zone scan, speed clamp)
- ``integrate_positions``: current position + next velocity * dt, wrapped
  into the periodic cubic domain

Both stages are ``prange`` loops over agents. Every agent reads only the
current generation and writes only its own slot of the next one.
"""

import math
import numpy as np
from numba import njit, prange


SPEED_LIMIT = 10.0
PREDATOR_SPEED_BONUS = 5.0
PREDATOR_RADIUS = 50.0
PREDATOR_STRENGTH = 160.0
CENTER_PULL = 6.0
VERTICAL_FLATTEN = 2.5
MIN_NEIGHBOR_DISTANCE = 1e-4
PI_2 = 2.0 * math.pi


# ============================================================================
# ZONE WEIGHTS
# ============================================================================

@njit(cache=True)
def separation_weight(percent: float, sep_thresh: float, dt: float) -> float:
    """Repulsion strength; grows without bound as percent -> 0, zero at the zone edge."""
    return (sep_thresh / percent - 1.0) * dt


@njit(cache=True)
def alignment_weight(t: float, dt: float) -> float:
    """Raised-cosine weight across the alignment zone, t in [0, 1]."""
    return (0.5 - math.cos(t * PI_2) * 0.5 + 0.5) * dt


@njit(cache=True)
def cohesion_weight(t: float, dt: float) -> float:
    """Complementary raised-cosine weight across the cohesion zone, t in [0, 1]."""
    return (0.5 - (math.cos(t * PI_2) * -0.5 + 0.5)) * dt


# ============================================================================
# VELOCITY UPDATE
# ============================================================================

@njit(fastmath=True, cache=True)
def agent_velocity(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    separation: float,
    alignment: float,
    cohesion: float,
    dt: float,
    has_predator: bool,
    predator_x: float,
    predator_y: float,
    predator_z: float,
    num_agents: int
):
    """
    New velocity of agent ``i`` from a generation snapshot.

    Pure: reads ``positions``/``velocities`` only, returns (vx, vy, vz, limit).
    """
    px = positions[i, 0]
    py = positions[i, 1]
    pz = positions[i, 2]

    vx = velocities[i, 0]
    vy = velocities[i, 1]
    vz = velocities[i, 2]
    limit = SPEED_LIMIT

    # Predator (planar: z ignored)
    if has_predator:
        dx = predator_x - px
        dy = predator_y - py
        dist = math.sqrt(dx * dx + dy * dy)
        if dist < PREDATOR_RADIUS:
            if dist > 0.0:
                f = (dist * dist / (PREDATOR_RADIUS * PREDATOR_RADIUS)) * dt * PREDATOR_STRENGTH
                vx += dx / dist * f
                vy += dy / dist * f
            limit += PREDATOR_SPEED_BONUS

    # Center pull, vertical displacement weighted to flatten the flock
    dx = px
    dy = py * VERTICAL_FLATTEN
    dz = pz
    dist = math.sqrt(dx * dx + dy * dy + dz * dz)
    if dist > 0.0:
        f = dt * CENTER_PULL / dist
        vx -= dx * f
        vy -= dy * f
        vz -= dz * f

    zone = separation + alignment + cohesion
    if zone > 0.0:
        zone_sq = zone * zone
        sep_thresh = separation / zone
        align_thresh = (separation + alignment) / zone

        for j in range(num_agents):
            if j == i:
                continue

            dx = positions[j, 0] - px
            dy = positions[j, 1] - py
            dz = positions[j, 2] - pz
            dist_sq = dx * dx + dy * dy + dz * dz
            dist = math.sqrt(dist_sq)

            if dist < MIN_NEIGHBOR_DISTANCE or dist_sq > zone_sq:
                continue

            percent = dist_sq / zone_sq

            if percent < sep_thresh:
                f = separation_weight(percent, sep_thresh, dt) / dist
                vx -= dx * f
                vy -= dy * f
                vz -= dz * f

            elif percent < align_thresh:
                t = (percent - sep_thresh) / (align_thresh - sep_thresh)
                ox = velocities[j, 0]
                oy = velocities[j, 1]
                oz = velocities[j, 2]
                speed = math.sqrt(ox * ox + oy * oy + oz * oz)
                if speed > 0.0:
                    f = alignment_weight(t, dt) / speed
                    vx += ox * f
                    vy += oy * f
                    vz += oz * f

            else:
                span = 1.0 - align_thresh
                if span <= 0.0:
                    # Zero-width cohesion band: exactly on the zone edge
                    continue
                t = (percent - align_thresh) / span
                f = cohesion_weight(t, dt) / dist
                vx += dx * f
                vy += dy * f
                vz += dz * f

    speed = math.sqrt(vx * vx + vy * vy + vz * vz)
    if speed > limit:
        scale = limit / speed
        vx *= scale
        vy *= scale
        vz *= scale

    return vx, vy, vz, limit


@njit(parallel=True, fastmath=True, cache=True)
def update_velocities(
    positions: np.ndarray,
    velocities: np.ndarray,
    out_velocities: np.ndarray,
    separation: float,
    alignment: float,
    cohesion: float,
    dt: float,
    has_predator: bool,
    predator_x: float,
    predator_y: float,
    predator_z: float,
    num_agents: int
):
    """Velocity Update Kernel over the full grid; writes ``out_velocities`` only."""
    for i in prange(num_agents):
        vx, vy, vz, _ = agent_velocity(
            i, positions, velocities,
            separation, alignment, cohesion, dt,
            has_predator, predator_x, predator_y, predator_z,
            num_agents
        )
        out_velocities[i, 0] = vx
        out_velocities[i, 1] = vy
        out_velocities[i, 2] = vz


# ============================================================================
# POSITION INTEGRATION
# ============================================================================

@njit(cache=True)
def wrap_coordinate(p: float, bounds: float) -> float:
    """Re-express a coordinate inside [-bounds, bounds] on a periodic axis."""
    if p > bounds or p < -bounds:
        span = 2.0 * bounds
        p = (p + bounds) % span - bounds
    return p


@njit(parallel=True, fastmath=True, cache=True)
def integrate_positions(
    positions: np.ndarray,
    new_velocities: np.ndarray,
    out_positions: np.ndarray,
    bounds: float,
    dt: float,
    num_agents: int
):
    """Position Integration Kernel: generation-t position + generation-(t+1) velocity."""
    for i in prange(num_agents):
        for dim in range(3):
            p = positions[i, dim] + new_velocities[i, dim] * dt
            out_positions[i, dim] = wrap_coordinate(p, bounds)


def warmup():
    """Pre-compile both kernels on a tiny grid."""
    n = 16
    pos = np.random.rand(n, 3).astype(np.float64) * 50
    vel = (np.random.rand(n, 3).astype(np.float64) - 0.5) * 10
    out_vel = np.zeros((n, 3), dtype=np.float64)
    out_pos = np.zeros((n, 3), dtype=np.float64)

    pos_ro = pos.view()
    pos_ro.flags.writeable = False
    vel_ro = vel.view()
    vel_ro.flags.writeable = False

    for p, v in ((pos, vel), (pos_ro, vel_ro)):
        update_velocities(p, v, out_vel, 20.0, 30.0, 20.0, 0.016, True, 0.0, 0.0, 0.0, n)
        integrate_positions(p, out_vel, out_pos, 500.0, 0.016, n)
