import numpy as np
import pytest

from prismatic.lines import Segment
from prismatic.plane import Plane
from prismatic.polygon import Polygon, PolygonBasis

SQUARE = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]


def test_counter_clockwise_square_normal_points_up():
    poly = Polygon(SQUARE)
    assert np.allclose(poly.normal, [0, 0, 1])
    assert poly.plane.d == pytest.approx(0.0)


def test_reversed_winding_gives_opposite_normal():
    forward = Polygon(SQUARE)
    backward = Polygon(list(reversed(SQUARE)))
    assert np.allclose(forward.normal, -backward.normal)


def test_repeated_points_raise():
    with pytest.raises(ValueError, match="repeated points"):
        Polygon.calculate_plane([(0, 0, 0), (0, 0, 0), (1, 1, 0)])


def test_collinear_points_raise():
    with pytest.raises(ValueError, match="cross product"):
        Polygon([(0, 0, 0), (1, 0, 0), (2, 0, 0)])


def test_bowtie_has_zero_area():
    with pytest.raises(ValueError, match="Zero area"):
        Polygon([(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)])


def test_too_few_vertices_raise():
    with pytest.raises(ValueError):
        Polygon([(0, 0, 0), (1, 0, 0)])


def test_with_plane_keeps_given_plane():
    plane = Plane.from_normal_and_point((0, 0, -1), (0, 0, 0))
    poly = Polygon.with_plane(SQUARE, plane)
    assert np.allclose(poly.get_normal(), plane.normal)


def test_flip_reverses_vertices_and_plane():
    poly = Polygon(SQUARE)
    flipped = poly.flip()
    assert all(np.array_equal(a, b) for a, b in zip(flipped.vertices, reversed(poly.vertices)))
    assert np.allclose(flipped.normal, -poly.normal)
    assert flipped.flip() == poly


def test_equality_ignores_rotation():
    rotated = SQUARE[2:] + SQUARE[:2]
    assert Polygon(SQUARE) == Polygon(rotated)


def test_equality_detects_different_shape():
    other = [(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)]
    assert not Polygon(SQUARE) == Polygon(other)
    assert not Polygon(SQUARE) == Polygon(SQUARE[:3])


def test_segments_form_closed_chain():
    segments = Polygon(SQUARE).get_segments()
    assert len(segments) == len(SQUARE)
    for current, following in zip(segments, segments[1:] + segments[:1]):
        assert np.array_equal(current.end, following.start)
    assert segments[0] == Segment(SQUARE[0], SQUARE[1])


def test_basis_is_orthonormal_and_in_plane():
    basis = Polygon.calculate_basis_2d(SQUARE)
    normal = Polygon(SQUARE).normal
    assert np.allclose(basis.center, np.mean(np.array(SQUARE, dtype=float), axis=0))
    assert basis.x @ basis.y == pytest.approx(0.0)
    assert np.linalg.norm(basis.x) == pytest.approx(1.0)
    assert np.linalg.norm(basis.y) == pytest.approx(1.0)
    assert basis.x @ normal == pytest.approx(0.0)
    assert basis.y @ normal == pytest.approx(0.0)


def test_project_unproject_round_trip():
    basis = Polygon.calculate_basis_2d(SQUARE)
    for vertex in SQUARE:
        back = basis.unproject(basis.project(vertex))
        assert np.allclose(back, vertex)
    assert np.allclose(basis.project(basis.center), [0, 0])


def test_svg_debug_draws_path():
    basis = PolygonBasis((0, 0, 0), (1, 0, 0), (0, 1, 0))
    svg = Polygon(SQUARE).svg_debug(basis)
    lines = svg.split("\n")
    assert lines[0] == '<circle cx="0" cy="0" r="0.08" fill="red"/> '
    assert lines[1] == '<circle cx="1" cy="0" r="0.08" fill="green"/> '
    assert len(lines) == 4
    assert 'd = "M 0 0 L 1 0 L 1 1 L 0 1 z"' in lines[3]


def test_repr_lists_vertices():
    text = repr(Polygon(SQUARE))
    lines = text.splitlines()
    assert lines[0] == "poly"
    assert lines[1] == "  v 0 0 0"
    assert len(lines) == 1 + len(SQUARE)