import pytest

from vexengine.core import EngineError
from vexengine.keycodes import Key, MouseButton
from vexengine.window import (
    UNKNOWN_KEY,
    OpenGLContext,
    WindowProps,
    translate_key,
    translate_mouse_button,
)


class FakeNative:
    def __init__(self):
        self.flips = 0

    def flip(self):
        self.flips += 1


def test_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Vex Engine", 1280, 720)


def test_props_custom_values():
    props = WindowProps("Test", 800, 600)
    assert (props.title, props.width, props.height) == ("Test", 800, 600)


def test_key_translation():
    assert translate_key(ord("z")) == Key.Z
    assert translate_key(0xFF1B) == Key.ESCAPE
    assert translate_key(0x12345) == UNKNOWN_KEY


def test_mouse_button_translation():
    assert translate_mouse_button(4) == MouseButton.RIGHT
    assert translate_mouse_button(2) == MouseButton.MIDDLE


def test_opengl_context_requires_handle():
    with pytest.raises(EngineError):
        OpenGLContext(None)


def test_opengl_context_swap_flips():
    native = FakeNative()
    context = OpenGLContext(native)
    context.swap_buffers()
    context.swap_buffers()
    assert native.flips == 2