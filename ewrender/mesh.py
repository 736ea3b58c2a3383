"""Vertex and mesh data containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Vertex:
    """A single mesh vertex: position, normal and texture coordinate."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)


class DrawMode(Enum):
    """How a mesh's data is interpreted when drawn."""

    TRIANGLES = 0
    POINTS = 1


@dataclass
class MeshData:
    """A list of vertices and the indices that join them into triangles."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def index_count(self) -> int:
        return len(self.indices)

    def positions(self) -> np.ndarray:
        """Vertex positions as an (N, 3) array."""
        return np.array([v.pos for v in self.vertices], dtype=float).reshape(-1, 3)

    def triangles(self) -> np.ndarray:
        """Indices grouped into an (M, 3) array, one row per triangle."""
        if len(self.indices) % 3:
            raise ValueError(
                f"index count {len(self.indices)} is not a multiple of 3"
            )
        return np.array(self.indices, dtype=np.int64).reshape(-1, 3)