"""Viewer application: pygame window driving the starlings simulation."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import starlings as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import BirdMesh, Grid, TextRenderer
from rendering.colors import parse_hex_color
from starlings import Starlings


class Application:
    """Owns the window, the simulation and the per-frame tick/render loop."""

    def __init__(self, **options):
        pygame.init()
        self.window_size = (config.WINDOW["width"], config.WINDOW["height"])
        pygame.display.set_mode(self.window_size, DOUBLEBUF | OPENGL)
        pygame.display.set_caption(config.WINDOW["title"])

        self.background = parse_hex_color(config.COLORS["background_color"])
        bird_color = parse_hex_color(config.COLORS["bird_color"])

        print("[App] Initializing starlings simulation...")
        self.simulation = Starlings(**options)
        bounds = self.simulation.params.bounds

        self.camera = Camera()
        self.input_handler = InputHandler(self.camera, self.simulation.signal, self.window_size)

        self.grid = Grid(bounds)
        self.birds = BirdMesh(self.simulation.bird_count, bird_color)
        self.text_renderer = TextRenderer(config.COLORS["hud"])

        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()
        print("[App] Ready!")

    def _setup_gl(self):
        glClearColor(*self.background, 1.0)
        glEnable(GL_DEPTH_TEST)
        glEnable(GL_FOG)
        glFogi(GL_FOG_MODE, GL_LINEAR)
        glFogfv(GL_FOG_COLOR, (*self.background, 1.0))
        glFogf(GL_FOG_START, config.FOG["start"])
        glFogf(GL_FOG_END, config.FOG["end"])

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            self.window_size[0] / self.window_size[1],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _handle_events(self):
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        self.input_handler.handle_continuous_input(dt)
        self.camera.update(dt)
        # The scheduler clamps dt itself
        state = self.simulation.tick(dt)
        self.birds.update(state.generation)
        return state

    def _render(self, state):
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()

        self.grid.draw()
        self.birds.draw()

        self.text_renderer.draw_lines(
            [
                f"Birds: {self.simulation.bird_count:,}  |  FPS: {self.fps:.0f}",
                f"Frame: {state.frame:,}  t={state.clock:.1f}s",
            ],
            10, 10, self.window_size
        )

        pygame.display.flip()

    def run(self):
        """Main loop; one simulation tick per rendered frame."""
        try:
            while self.running:
                dt = self.clock.tick() / 1000.0
                self.fps = self.clock.get_fps()

                self._handle_events()
                state = self._update(dt)
                self._render(state)
        finally:
            self.birds.release()
            self.simulation.stop()
            pygame.quit()
