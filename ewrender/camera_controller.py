"""Fly-camera control driven by mouse and keyboard input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .camera import Camera

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_PITCH_LIMIT = 89.0


class CursorMode(Enum):
    """What the window should do with the cursor after a move."""

    NORMAL = "normal"
    DISABLED = "disabled"


class Key(Enum):
    """Keys the controller reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    E = "e"
    Q = "q"
    LEFT_SHIFT = "left_shift"


@dataclass(frozen=True)
class InputState:
    """A snapshot of the input devices for one frame."""

    right_mouse: bool = False
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    keys: frozenset[Key] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", frozenset(self.keys))


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


@dataclass
class CameraController:
    """Aims a camera with the mouse and moves it with WASD/QE while the right button is held."""

    move_speed: float = 3.0
    sprint_move_speed: float = 6.0
    mouse_sensitivity: float = 0.1
    yaw: float = 0.0
    pitch: float = 0.0
    prev_mouse_x: float = 0.0
    prev_mouse_y: float = 0.0
    first_mouse: bool = field(default=True)

    def forward(self) -> np.ndarray:
        """Unit view direction for the current yaw and pitch (degrees)."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array([
            math.cos(pitch) * math.sin(yaw),
            math.sin(pitch),
            math.cos(pitch) * -math.cos(yaw),
        ])
        return _normalize(direction)

    def move(self, state: InputState, camera: Camera, delta_time: float) -> CursorMode:
        """Update aim and position from ``state``; return the cursor mode to apply."""
        if not state.right_mouse:
            self.first_mouse = True
            return CursorMode.NORMAL

        if self.first_mouse:
            self.first_mouse = False
            self.prev_mouse_x = state.mouse_x
            self.prev_mouse_y = state.mouse_y

        delta_x = state.mouse_x - self.prev_mouse_x
        delta_y = state.mouse_y - self.prev_mouse_y
        self.prev_mouse_x = state.mouse_x
        self.prev_mouse_y = state.mouse_y

        self.yaw += delta_x * self.mouse_sensitivity
        self.pitch -= delta_y * self.mouse_sensitivity
        self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)

        forward = self.forward()
        right = _normalize(np.cross(forward, _WORLD_UP))
        up = _normalize(np.cross(right, forward))

        speed = self.sprint_move_speed if Key.LEFT_SHIFT in state.keys else self.move_speed
        distance = speed * delta_time
        directions = {
            Key.W: forward,
            Key.S: -forward,
            Key.D: right,
            Key.A: -right,
            Key.E: up,
            Key.Q: -up,
        }
        position = np.asarray(camera.position, dtype=float).copy()
        for key, direction in directions.items():
            if key in state.keys:
                position += direction * distance

        camera.position = position
        camera.target = position + forward
        return CursorMode.DISABLED