"""Wireframe cube marking the periodic simulation domain."""

from OpenGL.GL import *
from config import starlings as config


class Grid:
    """Draws the +/- bounds cube the flock wraps around in."""

    def __init__(self, bounds: float):
        self.bounds = bounds
        self.color = config.GRID["color"]

    def draw(self):
        e = self.bounds
        corners = [(x, y, z) for x in (-e, e) for y in (-e, e) for z in (-e, e)]

        glBegin(GL_LINES)
        glColor3f(*self.color)
        for a in range(8):
            for b in range(a + 1, 8):
                # Edges join corners that differ on exactly one axis
                if sum(ca != cb for ca, cb in zip(corners[a], corners[b])) == 1:
                    glVertex3f(*corners[a])
                    glVertex3f(*corners[b])
        glEnd()
