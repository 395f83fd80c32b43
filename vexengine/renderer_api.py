"""Rendering back-ends and the static command front-end that forwards to one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence


class API(Enum):
    """Graphics APIs the engine knows about."""

    NONE = 0
    OPENGL = 1


_api = API.OPENGL


def get_api() -> API:
    """Return the graphics API resources are created for."""
    return _api


def set_api(api: API | int) -> None:
    """Select the graphics API; raises ``ValueError`` for an unknown value."""
    global _api
    _api = API(api)


class RendererAPI(ABC):
    """The drawing primitives a graphics back-end must provide."""

    @abstractmethod
    def init(self) -> None:
        """Prepare global render state."""

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used when clearing the frame."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the colour and depth buffers."""

    @abstractmethod
    def draw_indexed(self, vertex_array: Any) -> None:
        """Draw the triangles described by a vertex array's index buffer."""


def _gl():
    from pyglet import gl

    return gl


class OpenGLRendererAPI(RendererAPI):
    """Back-end issuing OpenGL calls on the current context."""

    def init(self) -> None:
        gl = _gl()
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)

    def set_clear_color(self, color: Sequence[float]) -> None:
        r, g, b, a = (float(c) for c in color)
        _gl().glClearColor(r, g, b, a)

    def clear(self) -> None:
        gl = _gl()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: Any) -> None:
        gl = _gl()
        count = vertex_array.index_buffer.count
        gl.glDrawElements(gl.GL_TRIANGLES, count, gl.GL_UNSIGNED_INT, None)


class RenderCommand:
    """Static entry points that forward to the active back-end."""

    _backend: RendererAPI = OpenGLRendererAPI()

    @staticmethod
    def use(backend: RendererAPI) -> RendererAPI:
        """Install ``backend`` and return the one it replaces."""
        if not isinstance(backend, RendererAPI):
            raise TypeError("backend must be a RendererAPI")
        previous = RenderCommand._backend
        RenderCommand._backend = backend
        return previous

    @staticmethod
    def init() -> None:
        RenderCommand._backend.init()

    @staticmethod
    def set_clear_color(color: Sequence[float]) -> None:
        RenderCommand._backend.set_clear_color(color)

    @staticmethod
    def clear() -> None:
        RenderCommand._backend.clear()

    @staticmethod
    def draw_indexed(vertex_array: Any) -> None:
        RenderCommand._backend.draw_indexed(vertex_array)