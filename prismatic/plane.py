"""Planes, triangular faces and rounding helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol, Tuple, TypeVar

import numpy as np

STABILITY_ROUNDING = 8

_T = TypeVar("_T", bound="Reversable")


class Reversable(Protocol):
    """Something whose orientation can be reversed."""

    def flip(self: _T) -> _T: ...


def round_dp(value: float, places: int) -> float:
    """Round to ``places`` decimal places, ties to even; never returns -0.0."""
    return round(float(value), places) + 0.0


def as_vector(value) -> np.ndarray:
    """Convert a three-component sequence to a float vector."""
    return np.array(value, dtype=float).reshape(3)


def normalize(vector) -> np.ndarray:
    """Return the unit vector in the direction of ``vector``."""
    v = as_vector(vector)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def _fmt(value: float) -> str:
    text = f"{round_dp(value, STABILITY_ROUNDING):.{STABILITY_ROUNDING}f}"
    text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(eq=False)
class Plane:
    """The plane of points ``p`` with ``normal . p == d``."""

    normal: np.ndarray
    d: float

    def __post_init__(self) -> None:
        self.normal = as_vector(self.normal)
        self.d = float(self.d)

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float, d: float) -> Plane:
        return cls(normalize((a, b, c)), d)

    @classmethod
    def from_normal_and_point(cls, normal, point) -> Plane:
        normal = as_vector(normal)
        return cls(normal, float(normal @ as_vector(point)))

    def flip(self) -> None:
        """Reverse the orientation of this plane in place."""
        self.normal = -self.normal
        self.d = -self.d

    def flipped(self) -> Plane:
        """Return a copy of this plane with reversed orientation."""
        return Plane(-self.normal, -self.d)

    def is_point_on_plane(self, point, tolerance: float) -> bool:
        return abs(float(self.normal @ as_vector(point)) - self.d) < tolerance

    def get_intersection_param(self, start, end):
        """Fraction along ``start``-``end`` where it crosses the plane, or None."""
        from_p = float(self.normal @ as_vector(start)) - self.d
        to_p = float(self.normal @ as_vector(end)) - self.d
        if from_p * to_p < 0:
            total = abs(from_p) + abs(to_p)
            return abs(from_p / total)
        return None

    def get_intersection_param2(self, start, end):
        """Parameter of the line through ``start`` and ``end`` on the plane, or None."""
        from_p = float(self.normal @ as_vector(start)) - self.d
        to_p = float(self.normal @ as_vector(end)) - self.d
        diff = from_p - to_p
        if diff == 0:
            return None
        return from_p / diff

    def point_on_plane(self) -> np.ndarray:
        return self.normal * self.d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return (
            round_dp(self.d - other.d, STABILITY_ROUNDING) == 0.0
            and round_dp(float(self.normal @ other.normal), STABILITY_ROUNDING) == 1.0
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        x, y, z = self.normal
        return f"{_fmt(x)}x  {_fmt(y)}y {_fmt(z)}z {_fmt(self.d)}"


@dataclass(eq=False)
class Face:
    """A triangle with its unit normal."""

    vertices: Tuple[np.ndarray, np.ndarray, np.ndarray]
    normal: np.ndarray

    def __post_init__(self) -> None:
        vertices = tuple(as_vector(v) for v in self.vertices)
        if len(vertices) != 3:
            raise ValueError("a face needs exactly three vertices")
        self.vertices = vertices
        self.normal = as_vector(self.normal)

    @classmethod
    def from_vertices(cls, vertices) -> Face:
        """Build a face, computing its normal from the winding of the vertices."""
        vs = tuple(as_vector(v) for v in vertices)
        if len(vs) != 3:
            raise ValueError("a face needs exactly three vertices")
        u, v, w = vs
        cross = np.cross(v - u, w - u)
        if float(cross @ cross) == 0.0:
            raise ValueError(f"degenerate face: {u} , {v} , {w}")
        return cls(vs, cross / float(np.linalg.norm(cross)))

    def get_plane(self) -> Plane:
        return Plane.from_normal_and_point(self.normal, self.vertices[0])

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return bool(
            np.array_equal(self.normal, other.normal)
            and all(np.array_equal(a, b) for a, b in zip(self.vertices, other.vertices))
        )

    __hash__ = None  # type: ignore[assignment]