import numpy as np
import pytest

from ewrender.procgen import create_cube, create_cylinder, create_plane, create_sphere


def _indices_in_range(mesh):
    return all(0 <= i < mesh.vertex_count() for i in mesh.indices)


def _face_normals(mesh):
    pos = mesh.positions()
    tris = mesh.triangles()
    a, b, c = pos[tris[:, 0]], pos[tris[:, 1]], pos[tris[:, 2]]
    return np.cross(b - a, c - a)


def test_cube_counts_match_six_faces():
    mesh = create_cube(1.0)
    assert mesh.vertex_count() == 24
    assert mesh.index_count() == 36
    assert _indices_in_range(mesh)


@pytest.mark.parametrize("size", [1.0, 2.5])
def test_cube_vertices_lie_on_their_face(size):
    mesh = create_cube(size)
    for v in mesh.vertices:
        assert np.dot(v.pos, v.normal) == pytest.approx(size / 2)
        assert np.all(np.abs(v.pos) <= size / 2 + 1e-9)


def test_cube_triangles_wind_outward():
    mesh = create_cube(2.0)
    tris = mesh.triangles()
    assert tris.shape == (12, 3)
    for tri, tri_normal in zip(tris, _face_normals(mesh)):
        vertex_normal = mesh.vertices[int(tri[0])].normal
        assert float(np.dot(tri_normal, vertex_normal)) > 0.0


def test_plane_is_flat_and_bounded():
    mesh = create_plane(4.0, 2.0, 3)
    pos = mesh.positions()
    assert np.allclose(pos[:, 1], 0.0)
    assert pos[:, 0].min() == pytest.approx(-2.0)
    assert pos[:, 0].max() == pytest.approx(2.0)
    assert pos[:, 2].min() == pytest.approx(-1.0)
    assert pos[:, 2].max() == pytest.approx(1.0)
    assert _indices_in_range(mesh)


def test_plane_faces_up():
    mesh = create_plane(4.0, 4.0, 2)
    tri_normals = _face_normals(mesh)
    assert np.all(tri_normals[:, 1] > 0)
    assert all(v.normal == (0.0, 1.0, 0.0) for v in mesh.vertices)


def test_plane_uvs_in_unit_square():
    mesh = create_plane(1.0, 1.0, 4)
    uvs = np.array([v.uv for v in mesh.vertices])
    assert uvs.min() == pytest.approx(0.0)
    assert uvs.max() == pytest.approx(1.0)


@pytest.mark.parametrize("factory", [
    lambda: create_plane(1.0, 1.0, 0),
    lambda: create_sphere(1.0, 0),
    lambda: create_cylinder(1.0, 1.0, 0),
])
def test_zero_subdivisions_rejected(factory):
    with pytest.raises(ValueError):
        factory()


@pytest.mark.parametrize("subdivisions", [1, 2, 8])
def test_sphere_vertices_on_surface(subdivisions):
    mesh = create_sphere(1.5, subdivisions)
    radii = np.linalg.norm(mesh.positions(), axis=1)
    assert np.allclose(radii, 1.5)
    normals = np.array([v.normal for v in mesh.vertices])
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)
    assert _indices_in_range(mesh)
    assert mesh.index_count() % 3 == 0


def test_sphere_poles_at_top_and_bottom():
    mesh = create_sphere(2.0, 6)
    assert mesh.vertices[0].pos[1] == pytest.approx(2.0)
    assert mesh.vertices[-1].pos[1] == pytest.approx(-2.0)


@pytest.mark.parametrize("subdivisions", [3, 16])
def test_cylinder_structure(subdivisions):
    mesh = create_cylinder(0.5, 2.0, subdivisions)
    assert mesh.vertex_count() == 4 * (subdivisions + 1) + 2
    assert mesh.vertices[0].pos == (0.0, 1.0, 0.0)
    assert mesh.vertices[-1].pos == (0.0, -1.0, 0.0)
    pos = mesh.positions()
    assert np.all(np.abs(pos[:, 1]) == pytest.approx(1.0))
    assert _indices_in_range(mesh)
    assert mesh.index_count() % 3 == 0


def test_cylinder_ring_normals():
    subdivisions = 5
    columns = subdivisions + 1
    mesh = create_cylinder(1.0, 2.0, subdivisions)
    top_cap = mesh.vertices[1:1 + columns]
    sides = mesh.vertices[1 + columns:1 + 3 * columns]
    bottom_cap = mesh.vertices[1 + 3 * columns:1 + 4 * columns]
    assert all(v.normal == (0.0, 1.0, 0.0) for v in top_cap)
    assert all(v.normal == (0.0, -1.0, 0.0) for v in bottom_cap)
    for v in sides:
        assert v.normal[1] == 0.0
        assert np.linalg.norm(v.normal) == pytest.approx(1.0)
        assert np.allclose(v.normal, np.array(v.pos) * [1, 0, 1])