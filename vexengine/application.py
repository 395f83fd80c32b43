"""The application object: owns the window and layers and runs the frame loop."""

from __future__ import annotations

import time
from typing import Callable

from . import renderer
from .core import EngineError, vex_assert
from .events import Event, EventDispatcher, WindowCloseEvent
from .layers import Layer, LayerStack
from .log import client_logger, core_logger
from .log import init as init_logging
from .timestep import Timestep
from .window import Window, create_window


class Application:
    """The single running application; create at most one at a time."""

    _instance: Application | None = None

    def __init__(self, window: Window | None = None) -> None:
        vex_assert(Application._instance is None, "Application already exists!")
        Application._instance = self
        self._running = True
        self._layer_stack = LayerStack()
        self._start = time.perf_counter()
        self._last_frame_time = 0.0
        try:
            self._window = window if window is not None else create_window()
            self._window.set_event_callback(self.on_event)
            renderer.init()
        except BaseException:
            Application._instance = None
            raise

    @classmethod
    def get(cls) -> Application:
        """Return the running application."""
        if Application._instance is None:
            raise EngineError("Assertion Failed: No application exists!")
        return Application._instance

    @property
    def window(self) -> Window:
        return self._window

    @property
    def layers(self) -> LayerStack:
        return self._layer_stack

    @property
    def running(self) -> bool:
        return self._running

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)

    def push_overlay(self, layer: Layer) -> None:
        self._layer_stack.push_overlay(layer)

    def on_event(self, event: Event) -> None:
        """Handle window closing, then offer the event to layers from the top down."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def run(self) -> None:
        """Run frames until the window is closed."""
        while self._running:
            now = time.perf_counter() - self._start
            timestep = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            for layer in self._layer_stack:
                layer.on_update(timestep)
            for layer in self._layer_stack:
                layer.on_imgui_render()

            self._window.on_update()

    def close(self) -> None:
        """Close the window and release the single-application slot."""
        if Application._instance is self:
            Application._instance = None
            self._window.close()

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True


def run_application(factory: Callable[[], Application]) -> int:
    """Set up logging, build the application with ``factory``, run it and close it."""
    init_logging()
    core_logger().warning("Vex Initialized")
    client_logger().info("Hello Vex Engine!")
    app = factory()
    try:
        app.run()
    finally:
        app.close()
    return 0