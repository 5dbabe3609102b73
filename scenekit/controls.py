"""Keyboard and mouse handling that steers a camera."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from scenekit.camera import Camera, CameraMovement

__all__ = ["Key", "Controls", "MouseLook"]


class Key(IntEnum):
    """Keyboard keys the controls react to, with their usual key codes."""

    SPACE = 32
    A = 65
    D = 68
    Q = 81
    S = 83
    W = 87
    ESCAPE = 256
    TAB = 258
    LEFT_SHIFT = 340


_MOVEMENT_KEYS: dict[Key, CameraMovement] = {
    Key.W: CameraMovement.FORWARD,
    Key.S: CameraMovement.BACKWARD,
    Key.A: CameraMovement.LEFT,
    Key.D: CameraMovement.RIGHT,
    Key.SPACE: CameraMovement.UP,
    Key.LEFT_SHIFT: CameraMovement.DOWN,
}


class Controls:
    """Translates the set of held keys into camera movement."""

    def __init__(self, camera: Camera | None = None) -> None:
        self.camera = camera

    def process_input(self, pressed_keys: Iterable[int], delta_time: float | None = None) -> bool:
        """Apply held keys for one frame; return True when the window should close.

        Without ``delta_time`` only the escape key is checked.
        """
        pressed = {int(key) for key in pressed_keys}
        should_close = Key.ESCAPE in pressed
        if delta_time is None or self.camera is None:
            return should_close
        for key, movement in _MOVEMENT_KEYS.items():
            if key in pressed:
                self.camera.process_keyboard(movement, delta_time)
        return should_close


class MouseLook:
    """Cursor, scroll and resize handling for a camera."""

    def __init__(
        self,
        camera: Camera | None,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
    ) -> None:
        self.camera = camera
        self.last_x = screen_width / 2.0
        self.last_y = screen_height / 2.0
        self.first_mouse = True

    def on_cursor(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor's movement since the last event."""
        if self.camera is None:
            return
        xpos = float(xpos)
        ypos = float(ypos)
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False
        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos  # screen y grows downwards
        self.last_x = xpos
        self.last_y = ypos
        self.camera.process_mouse_movement(xoffset, yoffset)

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        """Zoom the camera with the vertical scroll offset."""
        if self.camera is None:
            return
        self.camera.process_mouse_scroll(float(yoffset))

    def on_resize(self, width: int, height: int) -> None:
        """Keep the camera's aspect ratio in step with the framebuffer."""
        if self.camera is None:
            return
        self.camera.update_aspect_ratio(float(width), float(height))