"""Polling of keyboard and mouse state through a replaceable back-end."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class InputBackend(ABC):
    """Source of the current keyboard and mouse state."""

    @abstractmethod
    def is_key_pressed(self, keycode: int) -> bool:
        """Return whether the key is held down or repeating."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Return whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """Return the cursor position in window coordinates."""


class _StaticInput(InputBackend):
    """A fixed snapshot of input state; by default nothing is pressed."""

    def __init__(
        self,
        keys: Iterable[int] = (),
        buttons: Iterable[int] = (),
        position: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self._keys = frozenset(keys)
        self._buttons = frozenset(buttons)
        self._position = (float(position[0]), float(position[1]))

    def is_key_pressed(self, keycode: int) -> bool:
        return keycode in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._position


_backend: InputBackend = _StaticInput()


def set_backend(backend: InputBackend | None) -> InputBackend:
    """Install ``backend`` (``None`` for an idle one) and return the previous one."""
    global _backend
    if backend is None:
        backend = _StaticInput()
    if not isinstance(backend, InputBackend):
        raise TypeError("backend must be an InputBackend")
    previous, _backend = _backend, backend
    return previous


def is_key_pressed(keycode: int) -> bool:
    return bool(_backend.is_key_pressed(int(keycode)))


def is_mouse_button_pressed(button: int) -> bool:
    return bool(_backend.is_mouse_button_pressed(int(button)))


def get_mouse_position() -> tuple[float, float]:
    x, y = _backend.mouse_position()
    return (float(x), float(y))


def get_mouse_x() -> float:
    return get_mouse_position()[0]


def get_mouse_y() -> float:
    return get_mouse_position()[1]