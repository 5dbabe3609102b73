"""Models: meshes placed in the world with a transformation chain and material."""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np

from scenekit.materials import Material
from scenekit.mesh import Mesh, MeshType
from scenekit.transformations import (
    Rotation,
    Scale,
    Transformation,
    TransformationComposite,
    Translation,
    rotation_matrix,
)

__all__ = ["Model"]

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _triple(
    x: float | Sequence[float],
    y: float | None,
    z: float | None,
    *,
    uniform: bool = False,
) -> np.ndarray:
    if y is None and z is None:
        if isinstance(x, numbers.Real):
            if uniform:
                return np.full(3, float(x))
            raise TypeError("expected three components or a 3-vector")
        vec = np.asarray(x, dtype=float)
        if vec.shape != (3,):
            raise ValueError(f"expected a 3-vector, got shape {vec.shape}")
        return vec.copy()
    if y is None or z is None:
        raise TypeError("expected three components or a 3-vector")
    return np.array([x, y, z], dtype=float)


class Model:
    """A set of meshes sharing one placement, material and shader."""

    def __init__(self, mesh: Mesh | None = None) -> None:
        self.meshes: list[Mesh] = []
        self.position = np.zeros(3)
        self.rotation = np.zeros(3)
        self.scale = np.ones(3)
        self.transformations = TransformationComposite()
        self.material: Material | None = None
        self.shader: Any = None
        if mesh is not None:
            self.add_mesh(mesh)
        self._rebuild_transformations()

    def set_position(self, x: float | Sequence[float], y: float | None = None, z: float | None = None) -> None:
        self.position = _triple(x, y, z)
        self._rebuild_transformations()

    def translate(self, x: float | Sequence[float], y: float | None = None, z: float | None = None) -> None:
        self.position = self.position + _triple(x, y, z)
        self._rebuild_transformations()

    def set_rotation(self, x: float | Sequence[float], y: float | None = None, z: float | None = None) -> None:
        """Set Euler angles in radians."""
        self.rotation = _triple(x, y, z)
        self._rebuild_transformations()

    def rotate(self, x: float | Sequence[float], y: float | None = None, z: float | None = None) -> None:
        self.rotation = self.rotation + _triple(x, y, z)
        self._rebuild_transformations()

    def set_scale(self, x: float | Sequence[float], y: float | None = None, z: float | None = None) -> None:
        """Set per-axis scale, or a uniform scale when given one number."""
        self.scale = _triple(x, y, z, uniform=True)
        self._rebuild_transformations()

    def add_transformation(self, transformation: Transformation) -> None:
        """Append a transformation; it is dropped when the basic placement changes."""
        self.transformations.add_back(transformation)

    def add_transformation_front(self, transformation: Transformation) -> None:
        self.transformations.add_front(transformation)

    def clear_transformations(self) -> None:
        """Drop added transformations, keeping only position, rotation and scale."""
        self.transformations.clear()
        self._rebuild_transformations()

    def simplify_transformations(self) -> None:
        self.transformations.simplify()

    def model_matrix(self) -> np.ndarray:
        """The matrix of the full transformation chain."""
        return self.transformations.matrix()

    def basic_model_matrix(self) -> np.ndarray:
        """Translate, then rotate about X, Y, Z, then scale, ignoring the chain."""
        result = np.eye(4)
        result[:3, 3] = self.position
        result = result @ rotation_matrix(float(self.rotation[0]), _X_AXIS)
        result = result @ rotation_matrix(float(self.rotation[1]), _Y_AXIS)
        result = result @ rotation_matrix(float(self.rotation[2]), _Z_AXIS)
        return result @ np.diag([*self.scale, 1.0])

    def _rebuild_transformations(self) -> None:
        self.transformations.clear()
        if np.any(self.scale != 1.0):
            self.transformations.add_back(Scale(*self.scale))
        if np.any(self.rotation != 0.0):
            self.transformations.add_back(Rotation(*self.rotation))
        if np.any(self.position != 0.0):
            self.transformations.add_back(Translation(*self.position))

    def add_mesh(self, mesh: Mesh) -> None:
        self.meshes.append(mesh)

    def get_mesh(self, index: int) -> Mesh | None:
        """The mesh at ``index``, or None when there is none."""
        if 0 <= index < len(self.meshes):
            return self.meshes[index]
        return None

    def bind_material(self, shader: Any) -> None:
        """Upload the material and the model matrix to ``shader``."""
        if shader is None:
            return
        if self.material is not None:
            self.material.bind(shader)
        shader.set_mat4("model", self.model_matrix())

    def cleanup(self) -> None:
        """Drop meshes and transformations and release the material."""
        self.meshes.clear()
        self.transformations.clear()
        if self.material is not None:
            self.material.cleanup()
            self.material = None
        self.shader = None

    @classmethod
    def create_triangle(cls, mesh_type: MeshType = MeshType.BASIC) -> Model:
        return cls(Mesh.triangle(mesh_type))

    @classmethod
    def create_square(cls, mesh_type: MeshType = MeshType.BASIC) -> Model:
        return cls(Mesh.square(mesh_type))

    @classmethod
    def create_circle(
        cls, radius: float = 1.0, segments: int = 100, mesh_type: MeshType = MeshType.BASIC
    ) -> Model:
        return cls(Mesh.circle(radius, segments, mesh_type))