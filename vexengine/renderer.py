"""Scene-level drawing: per-scene camera data and submission of geometry."""

from __future__ import annotations

from typing import Any

import numpy as np

from .renderer_api import RenderCommand


def _frozen(matrix: np.ndarray) -> np.ndarray:
    matrix.flags.writeable = False
    return matrix


_scene_view_projection = _frozen(np.identity(4))
_scene_open = False
_scene_submissions = 0


def init() -> None:
    """Prepare the active rendering back-end."""
    RenderCommand.init()


def begin_scene(camera: Any) -> None:
    """Start a scene seen through ``camera``; its view-projection is captured now."""
    global _scene_view_projection, _scene_open, _scene_submissions
    _scene_view_projection = _frozen(np.array(camera.view_projection_matrix, dtype=float))
    _scene_open = True
    _scene_submissions = 0


def end_scene() -> int:
    """Close the current scene and return how many draws were submitted in it.

    Submissions are drawn immediately, so nothing is flushed here.
    """
    global _scene_open, _scene_submissions
    submitted = _scene_submissions if _scene_open else 0
    _scene_open = False
    _scene_submissions = 0
    return submitted


def submit(shader: Any, vertex_array: Any, transform: Any = None) -> None:
    """Draw ``vertex_array`` with ``shader`` at ``transform`` (identity by default)."""
    global _scene_submissions
    matrix = np.identity(4) if transform is None else np.asarray(transform, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError("transform must be a 4x4 matrix")
    shader.bind()
    shader.upload_uniform_mat4("u_ViewProjection", _scene_view_projection)
    shader.upload_uniform_mat4("u_Transform", matrix)
    vertex_array.bind()
    RenderCommand.draw_indexed(vertex_array)
    if _scene_open:
        _scene_submissions += 1


def scene_view_projection() -> np.ndarray:
    """Return the view-projection matrix of the current scene."""
    return _scene_view_projection