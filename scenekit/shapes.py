"""Built-in vertex data and models made from it."""

from __future__ import annotations

from scenekit.mesh import Mesh, MeshType
from scenekit.model import Model

__all__ = ["CUBE", "PLAIN", "cube_model", "plain_model"]

#: A cube from -1 to 1 as 36 positions (12 triangles).
CUBE: tuple[float, ...] = (
    -1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    -1.0, 1.0, 1.0,
    1.0, 1.0, -1.0,
    -1.0, -1.0, -1.0,
    -1.0, 1.0, -1.0,
    1.0, -1.0, 1.0,
    -1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, 1.0, -1.0,
    1.0, -1.0, -1.0,
    -1.0, -1.0, -1.0,
    -1.0, -1.0, -1.0,
    -1.0, 1.0, 1.0,
    -1.0, 1.0, -1.0,
    1.0, -1.0, 1.0,
    -1.0, -1.0, 1.0,
    -1.0, -1.0, -1.0,
    -1.0, 1.0, 1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, -1.0, -1.0,
    1.0, 1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, 1.0, 1.0,
    1.0, -1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, -1.0,
    -1.0, 1.0, -1.0,
    1.0, 1.0, 1.0,
    -1.0, 1.0, -1.0,
    -1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    -1.0, 1.0, 1.0,
    1.0, -1.0, 1.0,
)

#: A flat square in the XZ plane facing +Y: position, normal, texture coordinates.
PLAIN: tuple[float, ...] = (
    1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0, 1.0,
    1.0, 0.0, -1.0, 0.0, 1.0, 0.0, 1.0, 0.0,
    -1.0, 0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 0.0,
    -1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 1.0,
    1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0, 1.0,
    -1.0, 0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 0.0,
)

_CUBE_VERTICES = len(CUBE) // 3
_PLAIN_VERTICES = len(PLAIN) // 8


def cube_model(mesh_type: MeshType = MeshType.BASIC) -> Model:
    """A model holding the 36-vertex cube."""
    return Model(Mesh.from_array(CUBE, _CUBE_VERTICES, mesh_type))


def plain_model(mesh_type: MeshType = MeshType.UV) -> Model:
    """A model holding the two-triangle ground plane."""
    return Model(Mesh.from_array(PLAIN, _PLAIN_VERTICES, mesh_type))