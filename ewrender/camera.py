"""Camera with view and projection matrices (right-handed, clip depth -1..1)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_FLOAT_EPSILON = float(np.finfo(np.float32).eps)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def look_at(eye, target, up) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)
    f = _normalize(target - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fov_y`` is in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def orthographic(left, right, bottom, top, near, far) -> np.ndarray:
    """Orthographic projection of the given box."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


@dataclass
class Camera:
    """A camera looking from ``position`` at ``target``."""

    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 5.0]))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    fov: float = 60.0
    near_plane: float = 0.01
    far_plane: float = 100.0
    orthographic: bool = False
    ortho_height: float = 6.0
    aspect_ratio: float = 1.77

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float).copy()
        self.target = np.asarray(self.target, dtype=float).copy()

    def view_matrix(self) -> np.ndarray:
        to_target = _normalize(self.target - self.position)
        up = np.array([0.0, 1.0, 0.0])
        # Looking straight up or down: world up is useless, pick another.
        if abs(np.dot(to_target, up)) >= 1.0 - _FLOAT_EPSILON:
            up = np.array([0.0, 0.0, 1.0])
        return look_at(self.position, self.target, up)

    def projection_matrix(self) -> np.ndarray:
        if self.orthographic:
            half_width = self.ortho_height * self.aspect_ratio / 2.0
            half_height = self.ortho_height / 2.0
            return orthographic(
                -half_width, half_width, -half_height, half_height,
                self.near_plane, self.far_plane,
            )
        return perspective(
            math.radians(self.fov), self.aspect_ratio, self.near_plane, self.far_plane
        )