"""Affine transformations expressed as 4x4 matrices, composable into chains."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence

import numpy as np

__all__ = [
    "rotation_matrix",
    "rotate_vector",
    "look_at",
    "perspective",
    "Transformation",
    "Identity",
    "Matrix",
    "Rotation",
    "Scale",
    "Translation",
    "TransformationComposite",
]

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _vec3(value: Sequence[float]) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _normalize(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return value / length


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return a 4x4 matrix rotating by ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    result = np.eye(4)
    result[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return result


def rotate_vector(vector: Sequence[float], angle: float, axis: Sequence[float]) -> np.ndarray:
    """Rotate a 3-vector by ``angle`` radians about ``axis``."""
    return rotation_matrix(angle, axis)[:3, :3] @ _vec3(vector)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec3(eye)
    f = _normalize(_vec3(center) - eye_v)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    result = np.eye(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -float(np.dot(s, eye_v))
    result[1, 3] = -float(np.dot(u, eye_v))
    result[2, 3] = float(np.dot(f, eye_v))
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


class Transformation(ABC):
    """Anything that can be expressed as a 4x4 transformation matrix."""

    @abstractmethod
    def matrix(self) -> np.ndarray:
        """Return the 4x4 matrix of this transformation."""


class Identity(Transformation):
    """The transformation that leaves everything in place."""

    def matrix(self) -> np.ndarray:
        return np.eye(4)


class Matrix(Transformation):
    """A transformation given directly by a 4x4 matrix."""

    def __init__(self, matrix: Sequence[Sequence[float]] | np.ndarray | None = None) -> None:
        if matrix is None:
            self._matrix = np.eye(4)
        else:
            arr = np.array(matrix, dtype=float)
            if arr.shape != (4, 4):
                raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
            self._matrix = arr

    def matrix(self) -> np.ndarray:
        return self._matrix.copy()


class Rotation(Transformation):
    """Rotation by Euler angles in radians, applied about successively rotated axes."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.angles = np.array([x, y, z], dtype=float)

    def rotate(self, x: float, y: float, z: float) -> None:
        """Add the given angles to the current rotation."""
        self.angles = self.angles + np.array([x, y, z], dtype=float)

    def matrix(self) -> np.ndarray:
        rx, ry, rz = (float(a) for a in self.angles)
        result = rotation_matrix(ry, _X_AXIS)
        normal_y = rotate_vector(_Y_AXIS, -ry, _X_AXIS)
        result = result @ rotation_matrix(-rx, normal_y)
        normal_z = rotate_vector(_Z_AXIS, rx, normal_y)
        return result @ rotation_matrix(rz, normal_z)


class Scale(Transformation):
    """Non-uniform scaling along the three axes."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.factors = np.array([x, y, z], dtype=float)

    def matrix(self) -> np.ndarray:
        return np.diag([*self.factors, 1.0])


class Translation(Transformation):
    """Translation by a fixed offset."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.offset = np.array([x, y, z], dtype=float)

    def matrix(self) -> np.ndarray:
        result = np.eye(4)
        result[:3, 3] = self.offset
        return result


class TransformationComposite(Transformation):
    """An ordered chain of transformations; earlier entries are applied first."""

    def __init__(self, transformations: Iterable[Transformation] = ()) -> None:
        self._items: list[Transformation] = list(transformations)

    def matrix(self) -> np.ndarray:
        output = np.eye(4)
        for transformation in self._items:
            output = transformation.matrix() @ output
        return output

    def add_back(self, transformation: Transformation) -> None:
        """Append a transformation, applied after all existing ones."""
        self._items.append(transformation)

    def add_front(self, transformation: Transformation) -> None:
        """Prepend a transformation, applied before all existing ones."""
        self._items.insert(0, transformation)

    def simplify(self) -> None:
        """Collapse the chain into a single equivalent matrix."""
        combined = self.matrix()
        self._items = [Matrix(combined)]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transformation]:
        return iter(self._items)