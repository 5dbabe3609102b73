"""Scene behaviours: curve motion, spinning, skybox views and click-placed triangles."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

import numpy as np

from scenekit.bezier import BezierCurve
from scenekit.camera import Camera
from scenekit.controls import Key
from scenekit.mesh import MeshType
from scenekit.model import Model
from scenekit.shapes import cube_model

__all__ = [
    "DEFAULT_CONTROL_POINTS",
    "screen_to_world",
    "BezierMotion",
    "RotationMotion",
    "SkyboxView",
    "TriangleCanvas",
]

DEFAULT_CONTROL_POINTS: tuple[tuple[float, float, float], ...] = (
    (-2.0, -1.0, 0.0),
    (-1.0, 2.0, 0.0),
    (1.0, 2.0, 0.0),
    (2.0, -1.0, 0.0),
)

_TANGENT_STEP = 0.01
_TRIANGLE_SCALE = 0.2
_CLICK_DEPTH = 0.8


def screen_to_world(
    camera: Camera,
    x: float,
    y: float,
    width: float,
    height: float,
    depth: float = _CLICK_DEPTH,
) -> np.ndarray:
    """Unproject a window position at normalised depth ``depth`` to world space."""
    if width == 0 or height == 0:
        raise ValueError("window size must be non-zero")
    ndc_x = (x / width) * 2.0 - 1.0
    ndc_y = 1.0 - (y / height) * 2.0
    clip = np.array([ndc_x, ndc_y, depth, 1.0])
    inverse = np.linalg.inv(camera.projection_matrix() @ camera.view_matrix())
    world = inverse @ clip
    if world[3] != 0.0:
        world = world / world[3]
    return world[:3]


class BezierMotion:
    """Moves a model back and forth along a cubic Bezier curve, facing its direction."""

    def __init__(
        self,
        model: Model,
        control_points: Sequence[Sequence[float]] = DEFAULT_CONTROL_POINTS,
        speed: float = 0.3,
    ) -> None:
        self.model = model
        self.control_points = np.asarray(control_points, dtype=float)
        if self.control_points.shape != (4, 3):
            raise ValueError("expected four 3D control points")
        self.speed = speed
        self.t = 0.0
        self.reverse = False
        self.curve = BezierCurve()

    def update(self, delta_time: float) -> np.ndarray:
        """Advance along the curve and return the model's new position."""
        step = self.speed * delta_time
        if self.reverse:
            self.t -= step
            if self.t <= 0.0:
                self.t = 0.0
                self.reverse = False
        else:
            self.t += step
            if self.t >= 1.0:
                self.t = 1.0
                self.reverse = True

        position = self.curve.evaluate(self.control_points, self.t)
        self.model.set_position(position)

        if 0.0 < self.t < 1.0:
            ahead = self.curve.evaluate(self.control_points, min(self.t + _TANGENT_STEP, 1.0))
            behind = self.curve.evaluate(self.control_points, max(self.t - _TANGENT_STEP, 0.0))
            tangent = ahead - behind
            self.model.set_rotation(0.0, 0.0, math.atan2(tangent[1], tangent[0]))
        return position


class RotationMotion:
    """Spins a model about the Z axis at a constant rate."""

    def __init__(self, model: Model, degrees_per_second: float = 45.0) -> None:
        self.model = model
        self.degrees_per_second = degrees_per_second
        self.angle = 0.0

    def update(self, delta_time: float) -> float:
        """Advance the spin and return the current angle in radians, kept below 2π."""
        self.angle += math.radians(self.degrees_per_second) * delta_time
        self.angle = math.fmod(self.angle, 2.0 * math.pi)
        self.model.set_rotation(0.0, 0.0, self.angle)
        return self.angle


class SkyboxView:
    """A large cube around the camera, viewed from inside or outside."""

    def __init__(self, camera: Camera, scale: float = 50.0) -> None:
        self.camera = camera
        self.model = cube_model(MeshType.BASIC)
        self.model.set_scale(scale)
        self.inside = True

    def handle_key_press(self, key: int) -> None:
        """Q toggles between the inside and outside view."""
        if key == Key.Q:
            self.inside = not self.inside

    def view_matrix(self) -> np.ndarray:
        """The camera view, with translation removed when viewed from inside."""
        view = self.camera.view_matrix()
        if not self.inside:
            return view
        result = np.eye(4)
        result[:3, :3] = view[:3, :3]
        return result


class TriangleCanvas:
    """Triangles placed by clicking; each is identified by its 1-based stencil id."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.triangles: list[Model] = []

    def add_at(self, x: float, y: float, width: float, height: float) -> Model:
        """Place a small triangle under the window position and return it."""
        position = screen_to_world(self.camera, x, y, width, height)
        triangle = Model.create_triangle(MeshType.BASIC)
        triangle.set_position(position)
        triangle.set_scale(_TRIANGLE_SCALE)
        self.triangles.append(triangle)
        return triangle

    def remove_id(self, stencil_value: int) -> Model | None:
        """Remove the triangle with the given stencil id; return it, or None if none matches."""
        if 0 < stencil_value <= len(self.triangles):
            return self.triangles.pop(stencil_value - 1)
        return None

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Model]:
        return iter(self.triangles)