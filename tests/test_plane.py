import numpy as np
import pytest

from prismatic.plane import Face, Plane, normalize, round_dp


def test_round_dp():
    assert round_dp(1.23456, 2) == 1.23
    assert round_dp(0.125, 2) == 0.12
    assert str(round_dp(-1e-12, 8)) == "0.0"


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        normalize((0.0, 0.0, 0.0))


def test_from_coefficients_normalizes():
    plane = Plane.from_coefficients(0.0, 0.0, 2.0, 1.0)
    assert np.linalg.norm(plane.normal) == pytest.approx(1.0)
    assert plane == Plane(normal=(0.0, 0.0, 1.0), d=1.0)


def test_from_normal_and_point_contains_point():
    normal = normalize((1.0, 2.0, -2.0))
    point = (3.0, -1.0, 4.0)
    plane = Plane.from_normal_and_point(normal, point)
    assert plane.is_point_on_plane(point, 1e-9)
    assert plane.is_point_on_plane(plane.point_on_plane(), 1e-9)
    assert not plane.is_point_on_plane(np.array(point) + normal, 1e-9)


def test_flip_and_flipped():
    plane = Plane.from_coefficients(1.0, 1.0, 0.0, 3.0)
    original = Plane(plane.normal.copy(), plane.d)
    flipped = plane.flipped()
    assert flipped != original
    assert np.allclose(flipped.normal, -original.normal)
    assert flipped.d == -original.d
    plane.flip()
    assert plane == flipped
    plane.flip()
    assert plane == original


def test_equality_tolerates_tiny_differences():
    a = Plane(normal=(0.0, 0.0, 1.0), d=1.0)
    b = Plane(normal=(0.0, 0.0, 1.0), d=1.0 + 1e-12)
    c = Plane(normal=(0.0, 0.0, 1.0), d=1.5)
    assert a == b
    assert a != c


def test_repr():
    assert repr(Plane(normal=(0.0, 0.0, 1.0), d=2.0)) == "0x  0y 1z 2"


def test_intersection_param_crossing():
    plane = Plane(normal=(0.0, 0.0, 1.0), d=0.0)
    start = np.array([1.0, 2.0, -1.0])
    end = np.array([1.0, 2.0, 3.0])
    t = plane.get_intersection_param(start, end)
    assert 0.0 < t < 1.0
    assert plane.is_point_on_plane(start + (end - start) * t, 1e-9)


def test_intersection_param_same_side():
    plane = Plane(normal=(0.0, 0.0, 1.0), d=0.0)
    assert plane.get_intersection_param((0.0, 0.0, 1.0), (0.0, 0.0, 2.0)) is None


def test_intersection_param2():
    plane = Plane(normal=(0.0, 0.0, 1.0), d=0.0)
    start = np.array([0.0, 0.0, 1.0])
    end = np.array([1.0, 0.0, 2.0])
    t = plane.get_intersection_param2(start, end)
    assert t < 0.0
    assert plane.is_point_on_plane(start + (end - start) * t, 1e-9)
    assert plane.get_intersection_param2((0.0, 0.0, 1.0), (5.0, 5.0, 1.0)) is None


def test_face_normal_and_plane():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    face = Face.from_vertices(vertices)
    assert np.allclose(face.normal, (0.0, 0.0, 1.0))
    plane = face.get_plane()
    assert all(plane.is_point_on_plane(v, 1e-9) for v in face)
    assert len(list(face)) == 3


def test_face_normal_orthogonal_to_edges():
    face = Face.from_vertices([(1.0, 2.0, 3.0), (4.0, -1.0, 0.5), (2.0, 2.0, 7.0)])
    u, v, w = face.vertices
    assert np.linalg.norm(face.normal) == pytest.approx(1.0)
    assert face.normal @ (v - u) == pytest.approx(0.0, abs=1e-12)
    assert face.normal @ (w - u) == pytest.approx(0.0, abs=1e-12)


def test_face_degenerate_raises():
    with pytest.raises(ValueError):
        Face.from_vertices([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (2.0, 2.0, 2.0)])


def test_face_equality():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    face = Face.from_vertices(vertices)
    same = Face(vertices, face.normal)
    assert face == same
    assert face != Face(vertices, -face.normal)