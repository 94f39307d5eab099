"""Planar polygons and the 2D bases used to flatten them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from prismatic.lines import Segment
from prismatic.plane import STABILITY_ROUNDING, Plane, as_vector, normalize, round_dp

_COLORS = ("red", "green", "blue", "orange", "purple")


def _fmt(value: float, places: int) -> str:
    text = f"{round_dp(value, places):.{places}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(eq=False)
class PolygonBasis:
    """An origin and two in-plane axes used to map between 3D and 2D."""

    center: np.ndarray
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        self.center = as_vector(self.center)
        self.x = as_vector(self.x)
        self.y = as_vector(self.y)

    def project(self, point) -> np.ndarray:
        """Coordinates of ``point`` along the basis axes."""
        offset = as_vector(point) - self.center
        return np.array([float(offset @ self.x), float(offset @ self.y)])

    def unproject(self, point) -> np.ndarray:
        """The 3D point with the given 2D coordinates in this basis."""
        u, v = (float(c) for c in point)
        return self.center + self.x * u + self.y * v

    def __repr__(self) -> str:
        return "".join(
            f"  {label} {float(a)} {float(b)} {float(c)}\n"
            for label, (a, b, c) in (("o", self.center), ("x", self.x), ("y", self.y))
        )


class Polygon:
    """A closed planar polygon with its oriented plane."""

    def __init__(self, vertices: Iterable, plane: Optional[Plane] = None) -> None:
        self.vertices: List[np.ndarray] = [as_vector(v) for v in vertices]
        self.plane: Plane = self.calculate_plane(self.vertices) if plane is None else plane

    @classmethod
    def with_plane(cls, vertices: Iterable, plane: Plane) -> Polygon:
        """Build a polygon trusting the given plane instead of computing one."""
        return cls(vertices, plane)

    @property
    def normal(self) -> np.ndarray:
        return self.plane.normal

    @staticmethod
    def calculate_plane(vertices) -> Plane:
        """The plane of the vertices, oriented by their winding.

        Raises ValueError for repeated points, collinear leading points or zero area.
        """
        verts = [as_vector(v) for v in vertices]
        if len(verts) < 3:
            raise ValueError("a polygon needs at least three vertices")
        u, v, w = verts[0], verts[1], verts[-1]
        a = v - u
        b = w - u
        if float(a @ a) == 0.0 or float(b @ b) == 0.0:
            raise ValueError("Cannot calculate plane of polygon, we got repeated points")
        cross = np.cross(a, b)
        length = float(np.linalg.norm(cross))
        if length == 0.0:
            raise ValueError(
                "Cannot calculate plane of polygon, cross product have zero length"
            )
        plane = Plane.from_normal_and_point(cross / length, u)
        x_axis = normalize(a)
        y_axis = normalize(b)

        total_area = 0.0
        for current, following in zip(verts, verts[1:] + verts[:1]):
            x1, y1 = float(current @ x_axis), float(current @ y_axis)
            x2, y2 = float(following @ x_axis), float(following @ y_axis)
            total_area += x1 * y2 - x2 * y1
        if total_area < 0:
            plane.flip()
        if total_area == 0:
            raise ValueError("Zero area")
        return plane

    @staticmethod
    def calculate_basis_2d(vertices) -> PolygonBasis:
        """A basis centred on the vertex mean, x pointing at the first vertex."""
        verts = [as_vector(v) for v in vertices]
        plane = Polygon.calculate_plane(verts)
        center = sum(verts, np.zeros(3)) / len(verts)
        plane_x = normalize(verts[0] - center)
        plane_y = normalize(np.cross(plane.normal, plane_x))
        return PolygonBasis(center, plane_x, plane_y)

    def get_plane(self) -> Plane:
        return Plane(self.plane.normal.copy(), self.plane.d)

    def get_normal(self) -> np.ndarray:
        return self.plane.normal

    def flip(self) -> Polygon:
        """The same polygon with reversed winding and plane."""
        return Polygon.with_plane(list(reversed(self.vertices)), self.plane.flipped())

    def get_segments(self) -> List[Segment]:
        """The closed chain of edges, the last one returning to the first vertex."""
        following = self.vertices[1:] + self.vertices[:1]
        return [Segment(start, end) for start, end in zip(self.vertices, following)]

    def svg_debug(self, basis: PolygonBasis) -> str:
        """An SVG fragment drawing the polygon projected into ``basis``."""
        items = []
        path = []
        for ix, vertex in enumerate(self.vertices):
            px, py = basis.project(vertex)
            sx, sy = _fmt(px, 4), _fmt(py, 4)
            if ix <= 2:
                items.append(f'<circle cx="{sx}" cy="{sy}" r="0.08" fill="{_COLORS[ix]}"/> ')
            path.append(f"{'M' if ix == 0 else 'L'} {sx} {sy}")
        path.append("z")
        color = random.choice(_COLORS)
        items.append(f'<path stroke="{color}" stroke-width="0.06" d = "{" ".join(path)}" />')
        return "\n".join(items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if not self.vertices and not other.vertices:
            return True
        if len(self.vertices) != len(other.vertices):
            return False

        def same(p: np.ndarray, q: np.ndarray) -> bool:
            diff = p - q
            return round_dp(float(diff @ diff), STABILITY_ROUNDING) == 0.0

        first = self.vertices[0]
        other_ix = next(
            (ix for ix, p in enumerate(other.vertices) if same(p, first)), None
        )
        if other_ix is None:
            return False
        count = len(self.vertices)
        return all(
            same(self.vertices[i], other.vertices[(other_ix + i) % count])
            for i in range(1, count)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lines = ["poly"]
        lines.extend(
            f"  v {_fmt(x, 4)} {_fmt(y, 4)} {_fmt(z, 4)}" for x, y, z in self.vertices
        )
        return "\n".join(lines) + "\n"