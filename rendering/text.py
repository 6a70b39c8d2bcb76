"""HUD text drawn with pygame fonts over the GL scene."""

import pygame
from OpenGL.GL import *


class TextRenderer:
    """Blits pygame-rendered text as pixels in an orthographic overlay."""

    def __init__(self, color: tuple = (40, 40, 40), font_name: str = "monospace",
                 font_size: int = 16, line_spacing: int = 22):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = color
        self.line_spacing = line_spacing

    def _begin_overlay(self, screen_size: tuple):
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_FOG)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def _end_overlay(self):
        glDisable(GL_BLEND)
        glEnable(GL_FOG)
        glEnable(GL_DEPTH_TEST)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw lines of text top-down starting at (x, y).

        Args:
            lines: Iterable of strings
            x: X position from left edge
            y: Y position of the first line from top edge
            screen_size: (width, height) of the screen
        """
        self._begin_overlay(screen_size)
        for n, text in enumerate(lines):
            surface = self.font.render(text, True, self.color)
            data = pygame.image.tostring(surface, "RGBA", True)
            w, h = surface.get_size()
            glRasterPos2f(x, screen_size[1] - (y + n * self.line_spacing) - h)
            glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        self._end_overlay()
