"""Procedural generation of simple meshes."""

from __future__ import annotations

import math

import numpy as np

from .mesh import MeshData, Vertex


def _vertex(pos, normal, uv) -> Vertex:
    return Vertex(
        tuple(float(c) for c in pos),
        tuple(float(c) for c in normal),
        tuple(float(c) for c in uv),
    )


def _require_subdivisions(subdivisions: int) -> None:
    if subdivisions < 1:
        raise ValueError("subdivisions must be at least 1")


def _add_cube_face(mesh: MeshData, normal, size: float) -> None:
    normal = np.asarray(normal, dtype=float)
    start = len(mesh.vertices)
    a = np.array([normal[2], normal[0], normal[1]])
    b = np.cross(normal, a)
    for i in range(4):
        col, row = i % 2, i // 2
        pos = normal * size * 0.5 - (a + b) * size * 0.5 + (a * col + b * row) * size
        mesh.vertices.append(_vertex(pos, normal, (col, row)))
    mesh.indices.extend(
        [start, start + 1, start + 3, start + 3, start + 2, start]
    )


def create_cube(size: float) -> MeshData:
    """Axis-aligned cube of edge ``size`` centred on the origin."""
    mesh = MeshData()
    for normal in (
        (0, 0, 1),   # front
        (1, 0, 0),   # right
        (0, 1, 0),   # top
        (-1, 0, 0),  # left
        (0, -1, 0),  # bottom
        (0, 0, -1),  # back
    ):
        _add_cube_face(mesh, normal, size)
    return mesh


def create_plane(width: float, height: float, subdivisions: int) -> MeshData:
    """Flat grid in the XZ plane facing +Y, centred on the origin."""
    _require_subdivisions(subdivisions)
    mesh = MeshData()
    columns = subdivisions + 1
    for row in range(columns):
        for col in range(columns):
            u = col / subdivisions
            v = row / subdivisions
            pos = (-width / 2 + width * u, 0.0, height / 2 - height * v)
            mesh.vertices.append(_vertex(pos, (0, 1, 0), (u, v)))
    for row in range(subdivisions):
        for col in range(subdivisions):
            start = row * columns + col
            mesh.indices.extend([
                start, start + 1, start + columns + 1,
                start + columns + 1, start + columns, start,
            ])
    return mesh


def create_sphere(radius: float, subdivisions: int) -> MeshData:
    """UV sphere centred on the origin."""
    _require_subdivisions(subdivisions)
    mesh = MeshData()
    theta_step = 2.0 * math.pi / subdivisions
    phi_step = math.pi / subdivisions
    for row in range(subdivisions + 1):
        phi = row * phi_step
        for col in range(subdivisions + 1):
            theta = col * theta_step
            normal = np.array([
                math.cos(theta) * math.sin(phi),
                math.cos(phi),
                math.sin(theta) * math.sin(phi),
            ])
            uv = (col / subdivisions, 1.0 - row / subdivisions)
            mesh.vertices.append(_vertex(normal * radius, normal, uv))

    columns = subdivisions + 1
    side_start, pole_start = columns, 0
    for i in range(subdivisions):
        mesh.indices.extend([side_start + i, pole_start + i, side_start + i + 1])
    for row in range(1, subdivisions - 1):
        for col in range(subdivisions):
            start = row * columns + col
            mesh.indices.extend([
                start, start + 1, start + columns,
                start + columns, start + 1, start + columns + 1,
            ])
    pole_start = columns * columns - columns
    side_start = pole_start - columns
    for i in range(subdivisions):
        mesh.indices.extend([side_start + i, side_start + i + 1, pole_start + i])
    return mesh


def _add_cylinder_ring(
    mesh: MeshData, radius: float, subdivisions: int, y: float, side_facing: bool
) -> None:
    theta_step = 2.0 * math.pi / subdivisions
    for i in range(subdivisions + 1):
        theta = i * theta_step
        cos_a, sin_a = math.cos(theta), math.sin(theta)
        pos = (cos_a * radius, y, sin_a * radius)
        if side_facing:
            normal = (cos_a, 0.0, sin_a)
            uv = (i / subdivisions, 1.0 if y > 0 else 0.0)
        else:
            normal = (0.0, float(np.sign(y)), 0.0)
            uv = (cos_a * 0.5 + 0.5, sin_a * 0.5 + 0.5)
        mesh.vertices.append(_vertex(pos, normal, uv))


def create_cylinder(radius: float, height: float, subdivisions: int) -> MeshData:
    """Capped cylinder along the Y axis, centred on the origin."""
    _require_subdivisions(subdivisions)
    mesh = MeshData()
    top_y = height * 0.5
    bottom_y = -top_y

    mesh.vertices.append(_vertex((0, top_y, 0), (0, 1, 0), (0.5, 0.5)))
    _add_cylinder_ring(mesh, radius, subdivisions, top_y, False)
    _add_cylinder_ring(mesh, radius, subdivisions, top_y, True)
    _add_cylinder_ring(mesh, radius, subdivisions, bottom_y, True)
    _add_cylinder_ring(mesh, radius, subdivisions, bottom_y, False)
    mesh.vertices.append(_vertex((0, bottom_y, 0), (0, -1, 0), (0.5, 0.5)))

    columns = subdivisions + 1
    for i in range(columns):
        mesh.indices.extend([0, i + 1, i])
    side_start = columns
    for i in range(columns):
        start = side_start + i
        mesh.indices.extend([
            start, start + 1, start + columns,
            start + columns, start + 1, start + columns + 1,
        ])
    bottom_index = len(mesh.vertices) - 1
    side_start = bottom_index - columns
    for i in range(columns):
        mesh.indices.extend([bottom_index, side_start + i, side_start + i + 1])
    return mesh