"""Vertex arrays: vertex buffers with their layouts plus the index buffer that draws them."""

from __future__ import annotations

from .buffer import BufferLayout, IndexBuffer, ShaderDataType, VertexBuffer
from .core import EngineError, vex_assert
from .renderer_api import API, get_api

GL_INT = 0x1404
GL_FLOAT = 0x1406
GL_BOOL = 0x8B56

_BASE_TYPES = {
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.BOOL: GL_BOOL,
}


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """Return the OpenGL component type of ``data_type``."""
    try:
        return _BASE_TYPES[data_type]
    except KeyError:
        raise EngineError("Assertion Failed: Unknown ShaderDataType!") from None


def _gl():
    from pyglet import gl

    return gl


class VertexArray:
    """Groups vertex buffers and an index buffer into one drawable unit.

    The GPU object is created and its attributes are configured on the first
    :meth:`bind`, once a graphics context exists.
    """

    def __init__(self) -> None:
        self._vertex_buffers: list[VertexBuffer] = []
        self._layouts: list[BufferLayout] = []
        self._index_buffer: IndexBuffer | None = None
        self._renderer_id: int | None = None
        self._configured = 0
        self._index_attached = False

    def bind(self) -> None:
        gl = _gl()
        if self._renderer_id is None:
            handle = gl.GLuint()
            gl.glGenVertexArrays(1, handle)
            self._renderer_id = handle.value
        gl.glBindVertexArray(self._renderer_id)
        for vertex_buffer, layout in zip(
            self._vertex_buffers[self._configured :], self._layouts[self._configured :]
        ):
            self._configure(gl, vertex_buffer, layout)
        self._configured = len(self._vertex_buffers)
        if self._index_buffer is not None and not self._index_attached:
            self._index_buffer.bind()
            self._index_attached = True

    def unbind(self) -> None:
        _gl().glBindVertexArray(0)

    @staticmethod
    def _configure(gl, vertex_buffer: VertexBuffer, layout: BufferLayout) -> None:
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index,
                element.component_count,
                shader_data_type_to_gl_base_type(element.data_type),
                gl.GL_TRUE if element.normalized else gl.GL_FALSE,
                layout.stride,
                element.offset,
            )

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer; its layout must describe at least one attribute."""
        layout = vertex_buffer.layout
        vex_assert(len(layout), "Vertex Buffer has no layout!")
        self._vertex_buffers.append(vertex_buffer)
        self._layouts.append(layout)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self._index_buffer = index_buffer
        self._index_attached = False

    @property
    def vertex_buffers(self) -> tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> IndexBuffer | None:
        return self._index_buffer


def create_vertex_array() -> VertexArray:
    """Create a vertex array for the selected graphics API."""
    api = get_api()
    vex_assert(api is not API.NONE, "RendererAPI::None is currently not supported!")
    vex_assert(api is API.OPENGL, "Unknown RendererAPI!")
    return VertexArray()