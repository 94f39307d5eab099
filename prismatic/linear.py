"""How lines, rays and segments relate to one another."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from prismatic.lines import Line, Ray, Segment
from prismatic.plane import STABILITY_ROUNDING, as_vector, normalize, round_dp

NORMAL_DOT_ROUNDING = 4


class LinearRelation(Enum):
    """Relations between two linear objects that carry no point."""

    PARALLEL = "parallel"
    COLINEAR = "colinear"
    OPPOSITE = "opposite"
    INDEPENDENT = "independent"


@dataclass(eq=False)
class Crossed:
    """Skew objects: ``this`` and ``to`` are the closest points on each."""

    this: np.ndarray
    to: np.ndarray

    def __post_init__(self) -> None:
        self.this = as_vector(self.this)
        self.to = as_vector(self.to)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Crossed):
            return NotImplemented
        return bool(np.array_equal(self.this, other.this) and np.array_equal(self.to, other.to))

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class IntersectIn:
    """The objects meet at ``point``, strictly inside the second one."""

    point: np.ndarray

    def __post_init__(self) -> None:
        self.point = as_vector(self.point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntersectIn):
            return NotImplemented
        return bool(np.array_equal(self.point, other.point))

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class IntersectOrigin:
    """The objects meet at ``point``, an end of the segment."""

    point: np.ndarray

    def __post_init__(self) -> None:
        self.point = as_vector(self.point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntersectOrigin):
            return NotImplemented
        return bool(np.array_equal(self.point, other.point))

    __hash__ = None  # type: ignore[assignment]


Relation = Union[LinearRelation, Crossed, IntersectIn, IntersectOrigin]


def _solve(dot: float, b0: float, b1: float) -> Optional[Tuple[float, float]]:
    """Solve ``[[1, -dot], [dot, -1]] @ st == (b0, b1)``; None when singular."""
    det = -1.0 + dot * dot
    if det == 0.0:
        return None
    return (-b0 + dot * b1) / det, (-dot * b0 + b1) / det


def _is_negligible(vector: np.ndarray) -> bool:
    return round_dp(float(vector @ vector), STABILITY_ROUNDING) == 0.0


def _relate_lines(origin, direction, other_origin, other_dir, is_ray: bool) -> Relation:
    dot = float(direction @ other_dir)
    q = origin - other_origin
    if abs(round_dp(dot, STABILITY_ROUNDING)) == 1.0:
        magnitude_squared = float(q @ q)
        point_dot = float(q @ direction)
        if round_dp(point_dot - magnitude_squared, STABILITY_ROUNDING) == 0.0:
            return LinearRelation.COLINEAR
        if round_dp(point_dot + magnitude_squared, STABILITY_ROUNDING) == 0.0:
            return LinearRelation.OPPOSITE

    solved = _solve(dot, -float(q @ direction), -float(q @ other_dir))
    if solved is None:
        return LinearRelation.PARALLEL
    s, t = solved
    p1 = origin + direction * s
    p2 = other_origin + other_dir * t
    if _is_negligible(p1 - p2):
        if is_ray and t < 0:
            return LinearRelation.INDEPENDENT
        return IntersectIn(p1)
    return Crossed(p1, p2)


def relate_line_to_line(line: Line, other: Line) -> Relation:
    """Relate two infinite lines."""
    return _relate_lines(line.origin, line.dir, other.origin, other.dir, is_ray=False)


def relate_line_to_ray(line: Line, ray: Ray) -> Relation:
    """Relate an infinite line to a ray; a meeting behind the ray is independent."""
    return _relate_lines(line.origin, line.dir, ray.origin, ray.dir, is_ray=True)


def relate_line_to_segment(line: Line, segment: Segment) -> Relation:
    """Relate an infinite line to a segment."""
    segment_dir = normalize(segment.dir())
    dot = round_dp(float(line.dir @ segment_dir), STABILITY_ROUNDING - 1)
    q = line.origin - segment.start

    if abs(dot) == 1.0:
        distance = round_dp(float(q @ q), NORMAL_DOT_ROUNDING) ** 0.5
        point_dot = round_dp(abs(float(q @ line.dir)), NORMAL_DOT_ROUNDING)
        if round_dp(point_dot - distance, NORMAL_DOT_ROUNDING) == 0.0:
            return LinearRelation.COLINEAR if dot > 0 else LinearRelation.OPPOSITE

    dot = round_dp(float(line.dir @ segment_dir), STABILITY_ROUNDING)
    solved = _solve(dot, -float(q @ line.dir), -float(q @ segment_dir))
    if solved is None:
        return LinearRelation.PARALLEL
    s, t = solved
    p1 = line.origin + line.dir * s
    p2 = segment.start + segment_dir * t
    if not _is_negligible(p1 - p2):
        return Crossed(p1, p2)

    segment_len = round_dp(float(np.linalg.norm(segment.dir())), NORMAL_DOT_ROUNDING)
    y = round_dp(t / segment_len, NORMAL_DOT_ROUNDING)
    if y < 0 or y > 1:
        return LinearRelation.INDEPENDENT
    if y in (0.0, 1.0):
        return IntersectOrigin(p2)
    return IntersectIn(p1)


def relate_ray_to_segment(ray: Ray, segment: Segment) -> Relation:
    """Relate a ray to a segment; a meeting behind the ray is independent."""
    segment_dir = normalize(segment.dir())
    dot = round_dp(float(ray.dir @ segment_dir), STABILITY_ROUNDING - 1)
    q = ray.origin - segment.start

    if abs(dot) == 1.0:
        distance = float(np.linalg.norm(q))
        point_dot = abs(float(q @ ray.dir))
        if round_dp(point_dot - distance, STABILITY_ROUNDING) == 0.0:
            return LinearRelation.COLINEAR if dot > 0 else LinearRelation.OPPOSITE

    solved = _solve(dot, -float(q @ ray.dir), -float(q @ segment_dir))
    if solved is None:
        return LinearRelation.PARALLEL
    s, t = solved
    p1 = ray.origin + ray.dir * s
    p2 = segment.start + segment_dir * t
    if not _is_negligible(p1 - p2):
        return Crossed(p1, p2)

    segment_len = round_dp(float(np.linalg.norm(segment.dir())), STABILITY_ROUNDING)
    y = round_dp(t / segment_len, STABILITY_ROUNDING - 3)
    if y < 0 or y > 1 or s < 0:
        return LinearRelation.INDEPENDENT
    if y in (0.0, 1.0):
        return IntersectOrigin(p2)
    return IntersectIn(p1)