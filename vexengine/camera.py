"""Orthographic 2D camera.

Matrices use the mathematical convention: ``matrix @ column_vector``, with the
translation held in the last column.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return a right-handed orthographic projection mapping depth to [-1, 1]."""
    if right == left or top == bottom or far == near:
        raise ValueError("projection bounds must not be degenerate")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _translation(offset: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = offset
    return m


def _rotation_z(degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    m = np.identity(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def _frozen(matrix: np.ndarray) -> np.ndarray:
    matrix.flags.writeable = False
    return matrix


class OrthographicCamera:
    """A camera with a position, a rotation about Z and an orthographic projection."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._position = _frozen(np.zeros(3))
        self._rotation = 0.0
        self._view = _frozen(np.identity(4))
        self._projection = _frozen(ortho(left, right, bottom, top, -1.0, 1.0))
        self._view_projection = _frozen(self._projection @ self._view)

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _frozen(ortho(left, right, bottom, top, -1.0, 1.0))
        self._view_projection = _frozen(self._projection @ self._view)

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        position = np.array(value, dtype=float)
        if position.shape != (3,):
            raise ValueError("position must have three components")
        self._position = _frozen(position)
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        """Rotation about the Z axis in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection

    def _recalculate_view_matrix(self) -> None:
        transform = _translation(self._position) @ _rotation_z(self._rotation)
        self._view = _frozen(np.linalg.inv(transform))
        self._view_projection = _frozen(self._projection @ self._view)