"""Vertex meshes: raw vertex data, index lists and a few ready-made shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

__all__ = ["MeshType", "Vertex", "Mesh", "VERTEX_FLOATS"]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

#: Number of floats a vertex occupies in the interleaved buffer
#: (position, normal, texture coordinates).
VERTEX_FLOATS = 8


class MeshType(Enum):
    """Which vertex attributes a mesh carries."""

    BASIC = "basic"  # positions only
    NORMAL = "normal"  # positions + normals
    UV = "uv"  # positions + normals + texture coordinates

    @property
    def stride(self) -> int:
        """Floats per vertex in raw input data of this type."""
        return {MeshType.BASIC: 3, MeshType.NORMAL: 6, MeshType.UV: 8}[self]

    @property
    def attributes(self) -> tuple[tuple[int, int, int], ...]:
        """Enabled attributes as (location, component count, float offset)."""
        position = (0, 3, 0)
        normal = (1, 3, 3)
        tex = (2, 2, 6)
        return {
            MeshType.BASIC: (position,),
            MeshType.NORMAL: (position, normal),
            MeshType.UV: (position, normal, tex),
        }[self]


def _vec(value: Sequence[float], size: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in value)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} components, got {len(result)}")
    return result


@dataclass
class Vertex:
    """A single vertex; unused attributes stay at zero."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coords: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = _vec(self.position, 3, "position")  # type: ignore[assignment]
        self.normal = _vec(self.normal, 3, "normal")  # type: ignore[assignment]
        self.tex_coords = _vec(self.tex_coords, 2, "tex_coords")  # type: ignore[assignment]


_PLUS_Z: Vec3 = (0.0, 0.0, 1.0)


class Mesh:
    """A list of vertices, optionally drawn through an index list."""

    def __init__(self, mesh_type: MeshType = MeshType.BASIC) -> None:
        self.mesh_type = MeshType(mesh_type)
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self.use_indices = False

    @classmethod
    def from_array(
        cls,
        data: Iterable[float],
        vertex_count: int,
        mesh_type: MeshType,
        indices: Iterable[int] | None = None,
    ) -> Mesh:
        """Build a mesh from flat vertex data laid out as ``mesh_type`` describes."""
        mesh = cls(mesh_type)
        stride = mesh.mesh_type.stride
        values = [float(v) for v in data]
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        needed = vertex_count * stride
        if len(values) < needed:
            raise ValueError(
                f"{vertex_count} vertices of type {mesh.mesh_type.name} need "
                f"{needed} floats, got {len(values)}"
            )
        for start in range(0, needed, stride):
            chunk = values[start : start + stride]
            mesh.vertices.append(
                Vertex(
                    position=tuple(chunk[0:3]),
                    normal=tuple(chunk[3:6]) if stride >= 6 else (0.0, 0.0, 0.0),
                    tex_coords=tuple(chunk[6:8]) if stride >= 8 else (0.0, 0.0),
                )
            )
        if indices is not None:
            mesh.use_indices = True
            mesh.indices = [int(i) for i in indices]
        return mesh

    def add_vertex(
        self,
        position: Sequence[float] | Vertex,
        normal: Sequence[float] | None = None,
        tex_coords: Sequence[float] | None = None,
    ) -> None:
        """Append a vertex, given either as a Vertex or by its attributes."""
        if isinstance(position, Vertex):
            if normal is not None or tex_coords is not None:
                raise TypeError("pass either a Vertex or separate attributes, not both")
            self.vertices.append(replace(position))
            return
        self.vertices.append(
            Vertex(
                position=tuple(position),
                normal=tuple(normal) if normal is not None else (0.0, 0.0, 0.0),
                tex_coords=tuple(tex_coords) if tex_coords is not None else (0.0, 0.0),
            )
        )

    def add_index(self, index: int) -> None:
        self.indices.append(int(index))
        self.use_indices = True

    def add_triangle(self, i1: int, i2: int, i3: int) -> None:
        self.indices.extend((int(i1), int(i2), int(i3)))
        self.use_indices = True

    @classmethod
    def triangle(cls, mesh_type: MeshType = MeshType.BASIC) -> Mesh:
        """A triangle in the XY plane with its apex at the top."""
        mesh = cls(mesh_type)
        mesh.add_vertex((0.0, 0.5, 0.0))
        mesh.add_vertex((-0.5, -0.5, 0.0))
        mesh.add_vertex((0.5, -0.5, 0.0))
        if mesh.mesh_type in (MeshType.NORMAL, MeshType.UV):
            mesh.calculate_normals()
        if mesh.mesh_type is MeshType.UV:
            for vertex, uv in zip(mesh.vertices, [(0.5, 1.0), (0.0, 0.0), (1.0, 0.0)]):
                vertex.tex_coords = uv
        return mesh

    @classmethod
    def square(cls, mesh_type: MeshType = MeshType.BASIC) -> Mesh:
        """A unit square in the XY plane drawn as two indexed triangles."""
        mesh = cls(mesh_type)
        corners = [(-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.5, 0.5, 0.0), (-0.5, 0.5, 0.0)]
        for corner in corners:
            mesh.add_vertex(corner)
        mesh.add_triangle(0, 1, 2)
        mesh.add_triangle(2, 3, 0)
        if mesh.mesh_type in (MeshType.NORMAL, MeshType.UV):
            for vertex in mesh.vertices:
                vertex.normal = _PLUS_Z
        if mesh.mesh_type is MeshType.UV:
            uvs = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
            for vertex, uv in zip(mesh.vertices, uvs):
                vertex.tex_coords = uv
        return mesh

    @classmethod
    def circle(
        cls, radius: float = 1.0, segments: int = 100, mesh_type: MeshType = MeshType.BASIC
    ) -> Mesh:
        """A disc as a centre vertex followed by ``segments + 1`` rim vertices."""
        if segments <= 0:
            raise ValueError("segments must be positive")
        mesh = cls(mesh_type)
        mesh.add_vertex((0.0, 0.0, 0.0))
        angles = [i * 2.0 * math.pi / segments for i in range(segments + 1)]
        for angle in angles:
            mesh.add_vertex((radius * math.cos(angle), radius * math.sin(angle), 0.0))
        if mesh.mesh_type in (MeshType.NORMAL, MeshType.UV):
            for vertex in mesh.vertices:
                vertex.normal = _PLUS_Z
        if mesh.mesh_type is MeshType.UV:
            mesh.vertices[0].tex_coords = (0.5, 0.5)
            for vertex, angle in zip(mesh.vertices[1:], angles):
                vertex.tex_coords = (0.5 + 0.5 * math.cos(angle), 0.5 + 0.5 * math.sin(angle))
        return mesh

    def _faces(self) -> list[tuple[int, int, int]]:
        if self.use_indices:
            corners = self.indices
        else:
            corners = list(range(len(self.vertices)))
        if len(corners) % 3:
            raise ValueError("triangle list length is not a multiple of three")
        return [tuple(corners[i : i + 3]) for i in range(0, len(corners), 3)]  # type: ignore[misc]

    def calculate_normals(self) -> None:
        """Set each vertex normal to the normalised sum of its faces' normals."""
        positions = np.array([v.position for v in self.vertices], dtype=float).reshape(-1, 3)
        sums = np.zeros_like(positions)
        for a, b, c in self._faces():
            face = np.cross(positions[b] - positions[a], positions[c] - positions[a])
            length = float(np.linalg.norm(face))
            if length == 0.0:
                raise ValueError(f"degenerate triangle ({a}, {b}, {c}) has no normal")
            face /= length
            for corner in (a, b, c):
                sums[corner] += face
        for vertex, total in zip(self.vertices, sums):
            length = float(np.linalg.norm(total))
            normal = total / length if length else total
            vertex.normal = tuple(float(x) for x in normal)  # type: ignore[assignment]

    def interleaved(self) -> np.ndarray:
        """Vertex data as a float32 array of shape (n, VERTEX_FLOATS)."""
        rows = [(*v.position, *v.normal, *v.tex_coords) for v in self.vertices]
        return np.array(rows, dtype=np.float32).reshape(-1, VERTEX_FLOATS)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def index_count(self) -> int:
        return len(self.indices)