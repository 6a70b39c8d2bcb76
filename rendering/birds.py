"""Bird mesh: three triangles per agent, oriented along its velocity."""

import math
import numpy as np
from numba import njit, prange
from OpenGL.GL import *
from OpenGL.arrays import vbo


# Local model (x: wing span, y: up, z: forward): body, left wing, right wing
BIRD_TRIANGLES = np.array([
    [0.0, 0.0, -6.0], [0.0, 1.0, -15.0], [0.0, 0.0, 8.0],
    [0.0, 0.0, -4.0], [-6.0, 0.0, 0.0], [0.0, 0.0, 4.0],
    [0.0, 0.0, 4.0], [6.0, 0.0, 0.0], [0.0, 0.0, -4.0],
], dtype=np.float32)
BIRD_SCALE = 0.35
VERTS_PER_BIRD = 9


@njit(parallel=True, fastmath=True, cache=True)
def build_bird_vertices(
    positions: np.ndarray,
    velocities: np.ndarray,
    model: np.ndarray,
    scale: float,
    vertices: np.ndarray,
    num_birds: int
):
    """Place the bird model at each position, nose along the velocity."""
    for i in prange(num_birds):
        px, py, pz = positions[i, 0], positions[i, 1], positions[i, 2]

        vx, vy, vz = velocities[i, 0], velocities[i, 1], velocities[i, 2]
        speed = math.sqrt(vx * vx + vy * vy + vz * vz)
        if speed < 0.0001:
            fx, fy, fz = 0.0, 0.0, 1.0
        else:
            fx, fy, fz = vx / speed, vy / speed, vz / speed

        # Right = world_up x forward
        rx, ry, rz = fz, 0.0, -fx
        r_len = math.sqrt(rx * rx + rz * rz)
        if r_len < 0.1:
            # Flying straight up/down: use world X
            rx, ry, rz = 1.0, 0.0, 0.0
        else:
            rx /= r_len
            rz /= r_len

        # Up = forward x right
        ux = fy * rz - fz * ry
        uy = fz * rx - fx * rz
        uz = fx * ry - fy * rx

        base = i * 9
        for k in range(9):
            lx = model[k, 0] * scale
            ly = model[k, 1] * scale
            lz = model[k, 2] * scale
            vertices[base + k, 0] = px + rx * lx + ux * ly + fx * lz
            vertices[base + k, 1] = py + ry * lx + uy * ly + fy * lz
            vertices[base + k, 2] = pz + rz * lx + uz * ly + fz * lz


class BirdMesh:
    """Rebuilds and draws the flock's triangles each frame from the current generation."""

    def __init__(self, num_birds: int, color: tuple):
        self.num_birds = num_birds
        self.color = color
        self._vertices = np.zeros((num_birds * VERTS_PER_BIRD, 3), dtype=np.float32)
        self._vbo = None
        self._vbo_initialized = False

    def _init_vbo(self):
        if self._vbo_initialized:
            return
        try:
            self._vbo = vbo.VBO(self._vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_initialized = True
        except Exception as e:
            print(f"[Birds] VBO init failed, using client arrays: {e}")
            self._vbo = None

    def update(self, generation):
        """Rebuild vertices from a read-only generation snapshot."""
        build_bird_vertices(
            generation.positions,
            generation.velocities,
            BIRD_TRIANGLES,
            BIRD_SCALE,
            self._vertices,
            self.num_birds
        )

    def draw(self):
        if not self._vbo_initialized:
            self._init_vbo()

        total_verts = self.num_birds * VERTS_PER_BIRD
        glColor3f(*self.color)
        glEnableClientState(GL_VERTEX_ARRAY)

        if self._vbo is not None:
            self._vbo.set_array(self._vertices)
            self._vbo.bind()
            glVertexPointer(3, GL_FLOAT, 0, None)
            glDrawArrays(GL_TRIANGLES, 0, total_verts)
            self._vbo.unbind()
        else:
            glVertexPointer(3, GL_FLOAT, 0, self._vertices)
            glDrawArrays(GL_TRIANGLES, 0, total_verts)

        glDisableClientState(GL_VERTEX_ARRAY)

    def release(self):
        if self._vbo is not None:
            self._vbo.delete()
            self._vbo = None
        self._vbo_initialized = False
