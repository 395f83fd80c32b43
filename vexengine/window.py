"""Application windows backed by pyglet and the OpenGL context they render into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from . import input as vex_input
from .core import vex_assert
from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from .keycodes import Key, MouseButton
from .log import core_logger

UNKNOWN_KEY = -1

EventCallback = Callable[[Event], Any]


def _build_key_map() -> dict[int, Key]:
    keys: dict[int, Key] = {}
    keys.update({ord("a") + i: Key(Key.A + i) for i in range(26)})
    keys.update({ord("0") + i: Key(Key.D0 + i) for i in range(10)})
    keys.update(
        {
            ord("'"): Key.APOSTROPHE,
            ord(","): Key.COMMA,
            ord("-"): Key.MINUS,
            ord("."): Key.PERIOD,
            ord("/"): Key.SLASH,
            ord(";"): Key.SEMICOLON,
            ord("="): Key.EQUAL,
            ord("["): Key.LEFT_BRACKET,
            ord("\\"): Key.BACKSLASH,
            ord("]"): Key.RIGHT_BRACKET,
            ord("`"): Key.GRAVE_ACCENT,
            0xFF1B: Key.ESCAPE,
            0xFF0D: Key.ENTER,
            0xFF09: Key.TAB,
            0xFF08: Key.BACKSPACE,
            0xFF63: Key.INSERT,
            0xFFFF: Key.DELETE,
            0xFF53: Key.RIGHT,
            0xFF51: Key.LEFT,
            0xFF54: Key.DOWN,
            0xFF52: Key.UP,
            0xFF55: Key.PAGE_UP,
            0xFF56: Key.PAGE_DOWN,
            0xFF50: Key.HOME,
            0xFF57: Key.END,
            0xFFE5: Key.CAPS_LOCK,
            0xFF14: Key.SCROLL_LOCK,
            0xFF7F: Key.NUM_LOCK,
            0xFF61: Key.PRINT_SCREEN,
            0xFF13: Key.PAUSE,
            0xFFAE: Key.KP_DECIMAL,
            0xFFAF: Key.KP_DIVIDE,
            0xFFAA: Key.KP_MULTIPLY,
            0xFFAD: Key.KP_SUBTRACT,
            0xFFAB: Key.KP_ADD,
            0xFF8D: Key.KP_ENTER,
            0xFFBD: Key.KP_EQUAL,
            0xFFE1: Key.LEFT_SHIFT,
            0xFFE3: Key.LEFT_CONTROL,
            0xFFE9: Key.LEFT_ALT,
            0xFFEB: Key.LEFT_SUPER,
            0xFFE2: Key.RIGHT_SHIFT,
            0xFFE4: Key.RIGHT_CONTROL,
            0xFFEA: Key.RIGHT_ALT,
            0xFFEC: Key.RIGHT_SUPER,
            0xFF67: Key.MENU,
        }
    )
    keys.update({0xFFBE + i: Key(Key.F1 + i) for i in range(20)})
    keys.update({0xFFB0 + i: Key(Key.KP_0 + i) for i in range(10)})
    return keys


_KEYS = _build_key_map()

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    4: MouseButton.RIGHT,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def translate_key(symbol: int) -> int:
    """Map a pyglet key symbol to an engine key code, or ``UNKNOWN_KEY``."""
    return int(_KEYS.get(symbol, UNKNOWN_KEY))


def translate_mouse_button(button: int) -> int:
    """Map a pyglet mouse button bit to an engine mouse button code."""
    return int(_MOUSE_BUTTONS.get(button, button))


@dataclass
class WindowProps:
    """Title and initial size of a window."""

    title: str = "Vex Engine"
    width: int = 1280
    height: int = 720


class GraphicsContext(ABC):
    """A rendering context bound to a window."""

    @abstractmethod
    def init(self) -> None:
        """Make the context current and ready for drawing."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the frame that was just drawn."""


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    if isinstance(value, tuple):
        return ".".join(str(part) for part in value)
    return str(value)


class OpenGLContext(GraphicsContext):
    """OpenGL context of a pyglet window."""

    def __init__(self, window_handle: Any) -> None:
        vex_assert(window_handle is not None, "Window handle is null!")
        self._window_handle = window_handle

    def init(self) -> None:
        from pyglet.gl import gl_info

        self._window_handle.switch_to()
        version = getattr(gl_info, "get_version_string", gl_info.get_version)()
        logger = core_logger()
        logger.info("OpenGL Info:")
        logger.info("\tVendor: %s", _as_text(gl_info.get_vendor()))
        logger.info("\tRenderer: %s", _as_text(gl_info.get_renderer()))
        logger.info("\tVersion: %s", _as_text(version))

    def swap_buffers(self) -> None:
        self._window_handle.flip()


class _WindowInput(vex_input.InputBackend):
    """Input state collected from a window's events."""

    def __init__(self) -> None:
        self.keys: set[int] = set()
        self.buttons: set[int] = set()
        self.position = (0.0, 0.0)

    def is_key_pressed(self, keycode: int) -> bool:
        return keycode in self.keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self.buttons

    def mouse_position(self) -> tuple[float, float]:
        return self.position


def _ignore(event: Event) -> None:
    return None


def _create_native(props: WindowProps) -> Any:
    import pyglet

    return pyglet.window.Window(
        width=props.width, height=props.height, caption=props.title, resizable=True, vsync=True
    )


class Window:
    """A desktop window that turns native input into engine events.

    Cursor coordinates are reported with the origin at the top-left corner.
    """

    def __init__(self, props: WindowProps | None = None) -> None:
        self._setup(props, None, None)

    @classmethod
    def _attach(
        cls, props: WindowProps | None, native: Any, context: GraphicsContext | None = None
    ) -> Window:
        """Wrap an existing native window (and optionally a ready context)."""
        window = cls.__new__(cls)
        window._setup(props, native, context)
        return window

    def _setup(
        self, props: WindowProps | None, native: Any, context: GraphicsContext | None
    ) -> None:
        props = props if props is not None else WindowProps()
        self.title = props.title
        self._width = int(props.width)
        self._height = int(props.height)
        self._callback: EventCallback = _ignore
        core_logger().info("Creating window %s (%d, %d)", props.title, props.width, props.height)

        self._native = native if native is not None else _create_native(props)
        self._context = context if context is not None else OpenGLContext(self._native)
        self._context.init()

        self._input = _WindowInput()
        vex_input.set_backend(self._input)

        self._vsync = False
        self.vsync = True

        self._native.push_handlers(
            on_resize=self._on_resize,
            on_close=self._on_close,
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_text=self._on_text,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_scroll=self._on_mouse_scroll,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )

    def on_update(self) -> None:
        """Process pending native events and present the frame."""
        self._native.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._native.set_vsync(bool(enabled))
        self._vsync = bool(enabled)

    @property
    def native_window(self) -> Any:
        return self._native

    def close(self) -> None:
        """Destroy the native window and stop feeding input state."""
        self._native.close()
        previous = vex_input.set_backend(None)
        if previous is not self._input:
            vex_input.set_backend(previous)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _emit(self, event: Event) -> None:
        self._callback(event)

    def _on_resize(self, width: int, height: int) -> None:
        self._width, self._height = int(width), int(height)
        self._emit(WindowResizeEvent(self._width, self._height))

    def _on_close(self) -> bool:
        self._emit(WindowCloseEvent())
        return True

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        code = translate_key(symbol)
        self._input.keys.add(code)
        self._emit(KeyPressedEvent(code, 0))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        code = translate_key(symbol)
        self._input.keys.discard(code)
        self._emit(KeyReleasedEvent(code))
        return True

    def _on_text(self, text: str) -> None:
        for character in text:
            self._emit(KeyTypedEvent(ord(character)))

    def _on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        code = translate_mouse_button(button)
        self._input.buttons.add(code)
        self._emit(MouseButtonPressedEvent(code))

    def _on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        code = translate_mouse_button(button)
        self._input.buttons.discard(code)
        self._emit(MouseButtonReleasedEvent(code))

    def _on_mouse_scroll(self, x: float, y: float, scroll_x: float, scroll_y: float) -> None:
        self._emit(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        position = (float(x), float(self._height - y))
        self._input.position = position
        self._emit(MouseMovedEvent(*position))

    def _on_mouse_drag(
        self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
    ) -> None:
        self._on_mouse_motion(x, y, dx, dy)


def create_window(props: WindowProps | None = None) -> Window:
    """Open a window with ``props`` (defaults when omitted)."""
    return Window(props)