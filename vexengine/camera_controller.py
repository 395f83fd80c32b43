"""Keyboard-driven pan, rotate and scroll-zoom control of an orthographic camera."""

from __future__ import annotations

import numpy as np

from . import input as vex_input
from .camera import OrthographicCamera
from .events import Event, EventDispatcher, MouseScrolledEvent, WindowResizeEvent
from .keycodes import Key
from .timestep import Timestep

_MIN_ZOOM = 0.25
_ZOOM_STEP = 0.25


class OrthographicCameraController:
    """Moves a camera with W/A/S/D, rotates it with Q/E and zooms with the wheel."""

    def __init__(self, aspect_ratio: float, rotation: bool = True) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._camera = OrthographicCamera(*self._bounds())
        self._rotation = rotation
        self._position = np.zeros(3)
        self._camera_rotation = 0.0
        self._translation_speed = 5.0
        self._rotation_speed = 180.0

    def _bounds(self) -> tuple[float, float, float, float]:
        z, ar = self._zoom_level, self._aspect_ratio
        return (-ar * z, ar * z, -z, z)

    def on_update(self, ts: Timestep | float) -> None:
        dt = float(ts)
        step = self._translation_speed * dt
        if vex_input.is_key_pressed(Key.A):
            self._position[0] -= step
        elif vex_input.is_key_pressed(Key.D):
            self._position[0] += step

        if vex_input.is_key_pressed(Key.W):
            self._position[1] += step
        elif vex_input.is_key_pressed(Key.S):
            self._position[1] -= step

        if self._rotation:
            if vex_input.is_key_pressed(Key.Q):
                self._camera_rotation += self._rotation_speed * dt
            if vex_input.is_key_pressed(Key.E):
                self._camera_rotation -= self._rotation_speed * dt
            self._camera.rotation = self._camera_rotation

        self._camera.position = self._position
        self._translation_speed = self._zoom_level

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level = max(self._zoom_level - event.y_offset * _ZOOM_STEP, _MIN_ZOOM)
        self._camera.set_projection(*self._bounds())
        return False

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        # A minimised window reports a zero height; keep the last projection.
        if event.height == 0:
            return False
        self._aspect_ratio = event.width / event.height
        self._camera.set_projection(*self._bounds())
        return False