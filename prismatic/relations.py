"""Relations between planes, and between points and planes or polygons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

import numpy as np

from prismatic.linear import NORMAL_DOT_ROUNDING, IntersectIn, IntersectOrigin, relate_ray_to_segment
from prismatic.lines import Line, PointOnLine, Ray, Segment
from prismatic.plane import STABILITY_ROUNDING, Plane, as_vector, round_dp
from prismatic.polygon import Polygon


class PlanarRelation(Enum):
    COPLANAR = "coplanar"
    OPPOSITE = "opposite"
    PARALLEL = "parallel"


@dataclass(eq=False)
class PlaneIntersection:
    """Two planes meet along ``line``."""

    line: Line


class PointPlanarRelation(Enum):
    IN = "in"
    WITH_NORMAL = "with_normal"
    OPPOSE_TO_NORMAL = "oppose_to_normal"


class PointPolygonRelation(Enum):
    IN = "in"
    WITH_NORMAL = "with_normal"
    OPPOSE_TO_NORMAL = "oppose_to_normal"
    IN_PLANE = "in_plane"
    VERTEX = "vertex"


@dataclass(eq=False)
class OnEdge:
    """The point lies strictly inside ``segment``, an edge of the polygon."""

    segment: Segment


def _solve_pair(a: float, b: float, c: float, d: float, r0: float, r1: float):
    return np.linalg.solve(np.array([[a, b], [c, d]]), np.array([r0, r1]))


def relate_planes(first: Plane, second: Plane) -> Union[PlanarRelation, PlaneIntersection]:
    """Relate two planes; intersecting planes yield the line they share."""
    n1, n2 = first.normal, second.normal
    direction = np.cross(n1, n2)
    length_squared = round_dp(float(direction @ direction), STABILITY_ROUNDING)

    if length_squared == 0.0:
        if round_dp(float(n1 @ n2), STABILITY_ROUNDING - 3) == 1.0:
            if round_dp(first.d - second.d, STABILITY_ROUNDING - 3) == 0.0:
                return PlanarRelation.COPLANAR
            return PlanarRelation.PARALLEL
        if round_dp(first.d + second.d, STABILITY_ROUNDING) == 0.0:
            return PlanarRelation.OPPOSITE
        return PlanarRelation.PARALLEL

    direction = direction / length_squared**0.5
    x, y, z = (abs(float(c)) for c in direction)
    origin = np.zeros(3)

    if (y > x and y > z) or (y == z and y > x):
        r = _solve_pair(n1[0], n1[2], n2[0], n2[2], first.d, second.d)
        origin[0], origin[2] = r
    elif (z > x and z > y) or (x == z and x > y):
        r = _solve_pair(n1[0], n1[1], n2[0], n2[1], first.d, second.d)
        origin[0], origin[1] = r
    else:
        # x dominates, or all three components are equal
        r = _solve_pair(n1[1], n1[2], n2[1], n2[2], first.d, second.d)
        origin[1], origin[2] = r

    return PlaneIntersection(Line(origin, direction))


def relate_point_to_plane(plane: Plane, point) -> PointPlanarRelation:
    """Which side of ``plane`` the point lies on."""
    distance = round_dp(
        float(plane.normal @ as_vector(point)) - plane.d, NORMAL_DOT_ROUNDING + 2
    )
    if distance == 0.0:
        return PointPlanarRelation.IN
    if distance > 0:
        return PointPlanarRelation.WITH_NORMAL
    return PointPlanarRelation.OPPOSE_TO_NORMAL


def _swap_remove(items: List[Segment], index: int) -> Segment:
    item = items[index]
    items[index] = items[-1]
    items.pop()
    return item


def _near(a: np.ndarray, b: np.ndarray, places: int) -> bool:
    diff = a - b
    return round_dp(float(diff @ diff), places) == 0.0


def relate_point_to_polygon(
    polygon: Polygon, point
) -> Union[PointPolygonRelation, OnEdge]:
    """Where a point lies relative to a polygon, by ray casting inside its plane."""
    to = as_vector(point)
    side = relate_point_to_plane(polygon.get_plane(), to)
    if side is PointPlanarRelation.WITH_NORMAL:
        return PointPolygonRelation.WITH_NORMAL
    if side is PointPlanarRelation.OPPOSE_TO_NORMAL:
        return PointPolygonRelation.OPPOSE_TO_NORMAL

    segments = polygon.get_segments()
    ray = Ray(to, segments[0].to_line().dir)

    edges_crossed = 0
    vertices = []
    for segment in segments:
        on_line = segment.relate_point(to)
        if on_line is PointOnLine.ON:
            return OnEdge(segment)
        if on_line is PointOnLine.ORIGIN:
            return PointPolygonRelation.VERTEX

        relation = relate_ray_to_segment(ray, segment)
        if isinstance(relation, IntersectOrigin):
            vertices.append(relation.point)
        elif isinstance(relation, IntersectIn):
            edges_crossed += 1

    remaining = polygon.get_segments()
    for vertex in vertices:
        leaving = next(
            (i for i, s in enumerate(remaining) if _near(s.start, vertex, STABILITY_ROUNDING)),
            None,
        )
        if leaving is None:
            continue
        outgoing = _swap_remove(remaining, leaving)
        arriving = next(
            (i for i, s in enumerate(remaining) if _near(s.end, vertex, STABILITY_ROUNDING - 2)),
            None,
        )
        if arriving is None:
            continue
        incoming = _swap_remove(remaining, arriving)
        c1 = np.cross(ray.dir, outgoing.end - ray.origin)
        c2 = np.cross(ray.dir, incoming.start - ray.origin)
        if float(c1 @ c2) < 0:
            edges_crossed += 1

    if edges_crossed % 2 == 1:
        return PointPolygonRelation.IN
    return PointPolygonRelation.IN_PLANE