"""Keyboard, mouse and touch input: camera control and the predator pointer."""

import pygame
from pygame.locals import *
from config import starlings as config

from starlings.interaction import InteractionSignal, pixel_to_ndc
from .camera import Camera


class InputHandler:
    """
    Routes pygame events.

    Right-drag orbits the camera; plain pointer motion and single-finger
    touches feed the simulation's interaction signal.
    """

    def __init__(self, camera: Camera, signal: InteractionSignal, window_size: tuple):
        self.camera = camera
        self.signal = signal
        self.half_x = window_size[0] / 2
        self.half_y = window_size[1] / 2
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)

    def _pointer(self, px: float, py: float):
        self.signal.set_pointer(*pixel_to_ndc(px, py, self.half_x, self.half_y))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
        elif event.type == MOUSEMOTION:
            if not event.touch:
                self._pointer(*event.pos)
        elif event.type == WINDOWLEAVE:
            self.signal.clear()
        elif event.type == FINGERMOTION or event.type == FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            self._pointer(event.x * self.half_x * 2, event.y * self.half_y * 2)
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 3:
                self.mouse_dragging = True
                self.last_mouse_pos = event.pos
        elif event.type == MOUSEBUTTONUP:
            if event.button == 3:
                self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(-event.y * config.CAMERA["keyboard_zoom_speed"] * 0.25)

        return True

    def handle_continuous_input(self, dt: float):
        """Held keys and drag rotation (called each frame)."""
        keys = pygame.key.get_pressed()
        rot_speed = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_speed = config.CAMERA["keyboard_zoom_speed"] * dt

        if keys[K_a]:
            self.camera.rotate(-rot_speed, 0)
        if keys[K_d]:
            self.camera.rotate(rot_speed, 0)
        if keys[K_w]:
            self.camera.rotate(0, rot_speed)
        if keys[K_s]:
            self.camera.rotate(0, -rot_speed)
        if keys[K_q]:
            self.camera.zoom(-zoom_speed)
        if keys[K_e]:
            self.camera.zoom(zoom_speed)

        if self.mouse_dragging:
            current_pos = pygame.mouse.get_pos()
            dx = current_pos[0] - self.last_mouse_pos[0]
            dy = current_pos[1] - self.last_mouse_pos[1]
            self.camera.rotate(
                dx * config.CAMERA["mouse_sensitivity"],
                -dy * config.CAMERA["mouse_sensitivity"]
            )
            self.last_mouse_pos = current_pos
