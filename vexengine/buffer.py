"""Vertex layouts and the vertex and index buffers that hold geometry."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union

import numpy as np

from .core import EngineError
from .renderer_api import API, get_api


class ShaderDataType(Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Return the size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise EngineError("Assertion Failed: Unknown ShaderDataType!") from None


@dataclass
class BufferElement:
    """One named attribute inside an interleaved vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0
    size: int = field(init=False)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise EngineError("Assertion Failed: Unknown ShaderDataType!") from None


ElementSpec = Union[BufferElement, Sequence]


class BufferLayout:
    """Ordered attributes of a vertex, with offsets and stride worked out."""

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for spec in elements:
            element = spec if isinstance(spec, BufferElement) else BufferElement(*spec)
            placed.append(replace(element, offset=offset))
            offset += element.size
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    @property
    def stride(self) -> int:
        return self._stride

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"


def _gl():
    from pyglet import gl

    return gl


def _create_gl_buffer(target_name: str, data: np.ndarray) -> int:
    gl = _gl()
    target = getattr(gl, target_name)
    handle = gl.GLuint()
    gl.glGenBuffers(1, handle)
    gl.glBindBuffer(target, handle.value)
    gl.glBufferData(target, data.nbytes, data.tobytes(), gl.GL_STATIC_DRAW)
    return handle.value


def _bind_gl_buffer(target_name: str, renderer_id: int) -> None:
    gl = _gl()
    gl.glBindBuffer(getattr(gl, target_name), renderer_id)


def _delete_gl_buffer(renderer_id: int) -> None:
    gl = _gl()
    gl.glDeleteBuffers(1, gl.GLuint(renderer_id))


class _GpuBuffer:
    """Shared storage and GPU handle of a buffer uploaded on first bind."""

    _target_name = ""

    def __init__(self, data: np.ndarray) -> None:
        self.data = data
        self._renderer_id: int | None = None

    @property
    def size(self) -> int:
        """Size of the stored data in bytes."""
        return int(self.data.nbytes)

    def _bind_target(self) -> None:
        if self._renderer_id is None:
            self._renderer_id = _create_gl_buffer(self._target_name, self.data)
        else:
            _bind_gl_buffer(self._target_name, self._renderer_id)

    def _unbind_target(self) -> None:
        _bind_gl_buffer(self._target_name, 0)

    def _release(self) -> None:
        if self._renderer_id is not None:
            _delete_gl_buffer(self._renderer_id)
            self._renderer_id = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self._release()


class VertexBuffer(_GpuBuffer):
    """Interleaved 32-bit float vertex data plus its layout."""

    _target_name = "GL_ARRAY_BUFFER"

    def __init__(self, vertices: Iterable[float]) -> None:
        super().__init__(np.array(vertices, dtype=np.float32).ravel())
        self.layout = BufferLayout()

    def bind(self) -> None:
        """Bind the buffer, uploading its data the first time."""
        self._bind_target()

    def unbind(self) -> None:
        self._unbind_target()

    def close(self) -> None:
        """Release the GPU storage, if any was created."""
        self._release()


class IndexBuffer(_GpuBuffer):
    """Unsigned 32-bit triangle indices."""

    _target_name = "GL_ELEMENT_ARRAY_BUFFER"

    def __init__(self, indices: Iterable[int]) -> None:
        values = np.array(list(indices), dtype=np.int64).ravel()
        if values.size and values.min() < 0:
            raise ValueError("indices must not be negative")
        super().__init__(values.astype(np.uint32))

    def bind(self) -> None:
        """Bind the buffer, uploading its data the first time."""
        self._bind_target()

    def unbind(self) -> None:
        self._unbind_target()

    @property
    def count(self) -> int:
        return int(self.data.size)

    def close(self) -> None:
        """Release the GPU storage, if any was created."""
        self._release()


def _check_api() -> None:
    api = get_api()
    if api is API.NONE:
        raise EngineError("Assertion Failed: RendererAPI::None is currently not supported!")
    if api is not API.OPENGL:
        raise EngineError("Assertion Failed: Unknown RendererAPI!")


def create_vertex_buffer(vertices: Iterable[float]) -> VertexBuffer:
    """Create a vertex buffer for the selected graphics API."""
    _check_api()
    return VertexBuffer(vertices)


def create_index_buffer(indices: Iterable[int]) -> IndexBuffer:
    """Create an index buffer for the selected graphics API."""
    _check_api()
    return IndexBuffer(indices)