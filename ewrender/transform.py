"""Position, rotation and scale of an object, and quaternion helpers.

Quaternions are numpy arrays ordered (w, x, y, z).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _as_vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr.copy()


def quaternion_from_axis_angle(angle: float, axis) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    axis = _as_vec3(axis)
    length = np.linalg.norm(axis)
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    axis = axis / length
    half = angle * 0.5
    return np.concatenate(([np.cos(half)], np.sin(half) * axis))


def quaternion_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b``: applies ``b`` first, then ``a``."""
    aw, ax, ay, az = np.asarray(a, dtype=float)
    bw, bx, by, bz = np.asarray(b, dtype=float)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
        ]
    )


def quaternion_to_matrix(q) -> np.ndarray:
    """4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    m = np.identity(4)
    m[:3, :3] = [
        [1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)],
        [2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)],
        [2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)],
    ]
    return m


@dataclass
class Transform:
    """Translation, rotation and scale composing an object's model matrix."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _as_vec3(self.position)
        self.scale = _as_vec3(self.scale)
        rotation = np.asarray(self.rotation, dtype=float).reshape(-1)
        if rotation.shape != (4,):
            raise ValueError("rotation must be a (w, x, y, z) quaternion")
        self.rotation = rotation.copy()

    def model_matrix(self) -> np.ndarray:
        """Translate, then rotate, then scale (applied to points right to left)."""
        translation = np.identity(4)
        translation[:3, 3] = self.position
        scaling = np.diag(np.append(self.scale, 1.0))
        return translation @ quaternion_to_matrix(self.rotation) @ scaling

    def rotate(self, angle: float, axis) -> None:
        """Rotate by ``angle`` radians about ``axis`` in the object's local frame."""
        self.rotation = quaternion_multiply(
            self.rotation, quaternion_from_axis_angle(angle, axis)
        )