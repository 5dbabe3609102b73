"""A fly-through camera driven by Euler angles."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

import numpy as np

from scenekit.transformations import look_at, perspective

__all__ = [
    "CameraMovement",
    "Camera",
    "YAW",
    "PITCH",
    "SPEED",
    "SENSITIVITY",
    "FOV",
    "NEAR_PLANE",
    "FAR_PLANE",
]

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
FOV = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

_PITCH_LIMIT = 89.0
_MIN_FOV = 1.0
_MAX_FOV = 45.0


class CameraMovement(Enum):
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


def _unit(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("camera basis became degenerate")
    return v / length


class Camera:
    """Perspective camera with position, orientation and projection settings."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 3.0),
        world_up: Sequence[float] = (0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(world_up, dtype=float)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.fov = FOV
        self.aspect_ratio = 800.0 / 600.0
        self.near_plane = NEAR_PLANE
        self.far_plane = FAR_PLANE
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        return perspective(math.radians(self.fov), self.aspect_ratio, self.near_plane, self.far_plane)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera along one of its axes for ``delta_time`` seconds."""
        direction = CameraMovement(direction)
        velocity = self.movement_speed * delta_time
        steps = {
            CameraMovement.FORWARD: self.front,
            CameraMovement.BACKWARD: -self.front,
            CameraMovement.LEFT: -self.right,
            CameraMovement.RIGHT: self.right,
            CameraMovement.UP: self.up,
            CameraMovement.DOWN: -self.up,
        }
        self.position = self.position + steps[direction] * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by mouse offsets scaled by the sensitivity."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by narrowing or widening the field of view."""
        self.fov = min(max(self.fov - yoffset, _MIN_FOV), _MAX_FOV)

    def update_aspect_ratio(self, width: float, height: float) -> None:
        if height == 0:
            raise ValueError("height must be non-zero")
        self.aspect_ratio = width / height

    def set_planes(self, near: float, far: float) -> None:
        self.near_plane = near
        self.far_plane = far

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _unit(front)
        self.right = _unit(np.cross(self.front, self.world_up))
        self.up = _unit(np.cross(self.right, self.front))