import pytest

from prismatic.linear import (
    Crossed,
    IntersectIn,
    IntersectOrigin,
    LinearRelation,
    relate_line_to_line,
    relate_line_to_ray,
    relate_line_to_segment,
    relate_ray_to_segment,
)
from prismatic.lines import Line, Ray, Segment


@pytest.fixture
def segment():
    return Segment((1, 1, 1), (1, 1, -1))


@pytest.mark.parametrize(
    "origin, direction, expected",
    [
        ((1, 1, 1), (0, 0, -1), LinearRelation.COLINEAR),
        ((1, 1, 1), (0, 0, 1), LinearRelation.OPPOSITE),
        ((1, 1, 100), (0, 0, -1), LinearRelation.COLINEAR),
        ((1, 1, 100), (0, 0, 1), LinearRelation.OPPOSITE),
        ((1, 2, 1), (0, 0, 1), LinearRelation.PARALLEL),
        ((1, 2, 1), (0, 0, -1), LinearRelation.PARALLEL),
        ((1, 2, 1), (0, -1, 0), IntersectOrigin((1, 1, 1))),
        ((1, 2, -1), (0, -1, 0), IntersectOrigin((1, 1, -1))),
        ((1, 2, 0.5), (0, -1, 0), IntersectIn((1, 1, 0.5))),
    ],
)
def test_segment_line_relation(segment, origin, direction, expected):
    assert relate_line_to_segment(Line(origin, direction), segment) == expected


def test_line_misses_segment_beyond_end(segment):
    line = Line((1, 2, 3), (0, -1, 0))
    assert relate_line_to_segment(line, segment) == LinearRelation.INDEPENDENT


def test_lines_intersect():
    first = Line((0, 0, 0), (1, 0, 0))
    second = Line((0, -1, 0), (0, 1, 0))
    assert relate_line_to_line(first, second) == IntersectIn((0, 0, 0))


def test_skew_lines_are_crossed():
    first = Line((0, 0, 0), (1, 0, 0))
    second = Line((0, 0, 1), (0, 1, 0))
    assert relate_line_to_line(first, second) == Crossed((0, 0, 0), (0, 0, 1))


def test_same_line_is_colinear():
    line = Line((0, 0, 0), (1, 0, 0))
    assert relate_line_to_line(line, Line((0, 0, 0), (1, 0, 0))) == LinearRelation.COLINEAR


def test_parallel_lines():
    first = Line((0, 0, 0), (1, 0, 0))
    second = Line((0, 1, 0), (1, 0, 0))
    assert relate_line_to_line(first, second) == LinearRelation.PARALLEL


def test_line_meets_ray_in_front():
    line = Line((0, 0, 0), (1, 0, 0))
    ray = Ray((0, 1, 0), (0, -1, 0))
    assert relate_line_to_ray(line, ray) == IntersectIn((0, 0, 0))


def test_line_behind_ray_is_independent():
    line = Line((0, 0, 0), (1, 0, 0))
    ray = Ray((0, 1, 0), (0, 1, 0))
    assert relate_line_to_ray(line, ray) == LinearRelation.INDEPENDENT


def test_ray_crosses_segment_inside(segment):
    ray = Ray((1, 2, 0.5), (0, -1, 0))
    assert relate_ray_to_segment(ray, segment) == IntersectIn((1, 1, 0.5))


def test_ray_hits_segment_end(segment):
    ray = Ray((1, 2, 1), (0, -1, 0))
    assert relate_ray_to_segment(ray, segment) == IntersectOrigin((1, 1, 1))


def test_ray_pointing_away_is_independent(segment):
    ray = Ray((1, 2, 0.5), (0, 1, 0))
    assert relate_ray_to_segment(ray, segment) == LinearRelation.INDEPENDENT


def test_ray_along_segment_is_colinear(segment):
    ray = Ray((1, 1, 1), (0, 0, -1))
    assert relate_ray_to_segment(ray, segment) == LinearRelation.COLINEAR


def test_result_kinds_do_not_compare_equal():
    assert IntersectIn((1, 1, 1)) != IntersectOrigin((1, 1, 1))
    assert IntersectIn((1, 1, 1)) == IntersectIn((1.0, 1.0, 1.0))