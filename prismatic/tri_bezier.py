"""Cubic triangular Bezier patches."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from prismatic.plane import as_vector
from prismatic.polygon import Polygon

Index3 = Tuple[int, int, int]

_INDICES: Tuple[Index3, ...] = (
    (3, 0, 0),
    (2, 1, 0),
    (1, 2, 0),
    (0, 3, 0),
    (2, 0, 1),
    (1, 1, 1),
    (0, 2, 1),
    (1, 0, 2),
    (0, 1, 2),
    (0, 0, 3),
)
_POSITIONS: Dict[Index3, int] = {ix: pos for pos, ix in enumerate(_INDICES)}
_FACTORIALS = (1.0, 1.0, 2.0, 6.0)
_DETAILS = 5


def _fact(n: int) -> float:
    if not 0 <= n < len(_FACTORIALS):
        raise ValueError(f"factorial of {n} is out of range for a cubic patch")
    return _FACTORIALS[n]


def uvw(i: int, j: int, d: int) -> List[float]:
    """Barycentric coordinates of grid node ``(i, j)`` on a ``d``-step grid."""
    u = i / d
    v = (1.0 - u) * (1.0 - j / d)
    w = 1.0 - u - v
    return [v, w, u]


class TriBezier:
    """A cubic Bezier triangle defined by ten control points."""

    def __init__(self, vertices: Sequence) -> None:
        points = [as_vector(v) for v in vertices]
        if len(points) != len(_INDICES):
            raise ValueError("a cubic Bezier triangle needs exactly ten control points")
        self.vertices: List[np.ndarray] = points

    def get_vertex(self, ix) -> np.ndarray:
        """The control point with barycentric index ``ix``."""
        key = tuple(int(c) for c in ix)
        if key not in _POSITIONS:
            raise ValueError(f"unknown control point index {key}")
        return self.vertices[_POSITIONS[key]]

    @staticmethod
    def get_ix(ix: int) -> Index3:
        """The barycentric index of the control point at position ``ix``."""
        if not 0 <= ix < len(_INDICES):
            raise ValueError(f"control point position {ix} is out of range")
        return _INDICES[ix]

    @staticmethod
    def bernstein(ix, t) -> float:
        """The trivariate Bernstein polynomial for index ``ix`` at ``t``."""
        ix = tuple(int(c) for c in ix)
        power = 1.0
        for exponent, value in zip(ix, t):
            power *= float(value) ** exponent
        coefficient = _fact(sum(ix)) / (_fact(ix[0]) * _fact(ix[1]) * _fact(ix[2]))
        return power * coefficient

    def get_weight(self, t, ix: int) -> float:
        """The weight of control point ``ix`` at barycentric coordinates ``t``."""
        return self.bernstein(self.get_ix(ix), t)

    def get_point(self, t) -> np.ndarray:
        """The surface point at barycentric coordinates ``t``."""
        return sum(
            (vertex * self.get_weight(t, ix) for ix, vertex in enumerate(self.vertices)),
            np.zeros(3),
        )

    def polygonize(self) -> List[Polygon]:
        """Triangulate the patch into polygons."""
        faces: List[Polygon] = []
        for i in range(1, _DETAILS + 1):
            for j in range(1, _DETAILS + 1):
                a = self.get_point(uvw(i - 1, j - 1, _DETAILS))
                b = self.get_point(uvw(i - 1, j, _DETAILS))
                c = self.get_point(uvw(i, j - 1, _DETAILS))
                d = self.get_point(uvw(i, j, _DETAILS))
                faces.append(Polygon([a, b, c]))
                if i != _DETAILS:
                    faces.append(Polygon([b, d, c]))
        return faces