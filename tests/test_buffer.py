import numpy as np
import pytest

from vexengine.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexBuffer,
    create_index_buffer,
    create_vertex_buffer,
    shader_data_type_size,
)
from vexengine.core import EngineError
from vexengine.renderer_api import API, get_api, set_api


@pytest.fixture
def restore_api():
    saved = get_api()
    yield
    set_api(saved)


@pytest.mark.parametrize(
    "data_type, size",
    [
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT2, 4 * 2),
        (ShaderDataType.FLOAT3, 4 * 3),
        (ShaderDataType.FLOAT4, 4 * 4),
        (ShaderDataType.MAT3, 4 * 3 * 3),
        (ShaderDataType.MAT4, 4 * 4 * 4),
        (ShaderDataType.INT, 4),
        (ShaderDataType.INT3, 4 * 3),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_shader_data_type_size(data_type, size):
    assert shader_data_type_size(data_type) == size


def test_shader_data_type_size_none_raises():
    with pytest.raises(EngineError):
        shader_data_type_size(ShaderDataType.NONE)


@pytest.mark.parametrize(
    "data_type, count",
    [
        (ShaderDataType.FLOAT, 1),
        (ShaderDataType.FLOAT2, 2),
        (ShaderDataType.FLOAT4, 4),
        (ShaderDataType.MAT3, 3 * 3),
        (ShaderDataType.MAT4, 4 * 4),
        (ShaderDataType.INT2, 2),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_component_count(data_type, count):
    assert BufferElement(data_type, "attr").component_count == count


def test_element_size_matches_type():
    element = BufferElement(ShaderDataType.FLOAT4, "a_Color")
    assert element.size == shader_data_type_size(ShaderDataType.FLOAT4)
    assert element.offset == 0
    assert element.normalized is False


def test_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
        ]
    )
    assert [e.offset for e in layout] == [0, 12]
    assert layout.stride == sum(e.size for e in layout)
    assert [e.name for e in layout.elements] == ["a_Position", "a_Color"]
    assert len(layout) == 2


def test_layout_accepts_tuples():
    layout = BufferLayout(
        [(ShaderDataType.FLOAT3, "a_Position"), (ShaderDataType.FLOAT2, "a_TexCoord", True)]
    )
    second = layout.elements[1]
    assert second.data_type is ShaderDataType.FLOAT2
    assert second.normalized is True
    assert second.offset == shader_data_type_size(ShaderDataType.FLOAT3)


def test_layout_does_not_mutate_given_elements():
    first = BufferElement(ShaderDataType.FLOAT3, "a")
    second = BufferElement(ShaderDataType.FLOAT3, "b")
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    assert list(layout) == []


def test_vertex_buffer_holds_float32_data():
    vertices = [-0.5, -0.5, 0.0, 0.5, -0.5, 0.0]
    vb = VertexBuffer(vertices)
    assert vb.data.dtype == np.float32
    np.testing.assert_allclose(vb.data, vertices)
    assert vb.size == 4 * len(vertices)
    assert len(vb.layout) == 0


def test_vertex_buffer_layout_assignment():
    vb = VertexBuffer([0.0] * 5)
    layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position"), (ShaderDataType.FLOAT2, "a_TexCoord")])
    vb.layout = layout
    assert vb.layout is layout


def test_vertex_buffer_copies_input():
    source = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    vb = VertexBuffer(source)
    source[0] = 9.0
    assert vb.data[0] == pytest.approx(1.0)


def test_index_buffer_count():
    ib = IndexBuffer([0, 1, 2, 2, 3, 0])
    assert ib.count == 6
    assert ib.data.dtype == np.uint32
    assert ib.data.tolist() == [0, 1, 2, 2, 3, 0]


def test_index_buffer_rejects_negative():
    with pytest.raises(ValueError):
        IndexBuffer([0, -1, 2])


def test_buffer_context_manager_returns_itself():
    with IndexBuffer([0, 1, 2]) as ib:
        assert ib.count == 3


def test_create_buffers_with_opengl(restore_api):
    set_api(API.OPENGL)
    vb = create_vertex_buffer([0.0, 1.0])
    ib = create_index_buffer([0, 1, 2])
    assert isinstance(vb, VertexBuffer)
    assert ib.count == 3


def test_create_buffers_with_none_api_raises(restore_api):
    set_api(API.NONE)
    with pytest.raises(EngineError):
        create_vertex_buffer([0.0])
    with pytest.raises(EngineError):
        create_index_buffer([0])