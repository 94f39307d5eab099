# prismatic

Geometric building blocks for working with 3D meshes: planes, triangular
faces, polygons, lines, rays and segments, the relations between them,
parametric patches, and a few ready-made solid shapes.

Vectors are `numpy` arrays of three floats. Comparisons that have to
survive round-off are made after rounding to a fixed number of decimal
places (see `prismatic.plane.round_dp`, and `STABILITY_ROUNDING`, which is 8).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `prismatic.point`: `SuperPoint`, a position together with an edge
  direction, with component-wise `+`, `-`, `*` and `/`, `magnitude()`,
  `zero()`, `one()` and `is_zero()`.
- `prismatic.plane`: `Plane` (a unit normal and an offset `d`, built with
  `from_coefficients` or `from_normal_and_point`; `flip`, `flipped`,
  `is_point_on_plane`, `get_intersection_param`, `get_intersection_param2`,
  `point_on_plane`), `Face` (a triangle with its normal; `from_vertices`
  raises `ValueError` for a degenerate triangle), and the helpers
  `round_dp`, `as_vector` and `normalize`.
- `prismatic.lines`: `Line`, `Ray` and `Segment`. Each has `relate_point`,
  which returns a `PointOnLine` (`ON`, `OUTSIDE` or `ORIGIN`). A segment's
  ends count as `ORIGIN`.
- `prismatic.linear`: `relate_line_to_line`, `relate_line_to_ray`,
  `relate_line_to_segment` and `relate_ray_to_segment`. They return a
  `LinearRelation` (`PARALLEL`, `COLINEAR`, `OPPOSITE`, `INDEPENDENT`), a
  `Crossed` holding the closest points of two skew objects, an
  `IntersectIn` or an `IntersectOrigin` (a meeting at a segment's end).
- `prismatic.primitives`: `PointInPlane`, `index_pairs(size)` yielding
  `(0, 1), (1, 2), ...`, and `segments(count)` splitting `[0, 1]` into equal
  pieces.
- `prismatic.polygon`: `Polygon` (vertices and an oriented plane;
  `calculate_plane`, `calculate_basis_2d`, `with_plane`, `flip`,
  `get_segments`, `svg_debug`) and `PolygonBasis` with `project` and
  `unproject` between 3D and 2D. Building a polygon whose plane cannot be
  found (repeated points, collinear leading points, zero area) raises
  `ValueError`. Two polygons compare equal when they have the same vertices
  in the same cyclic order.
- `prismatic.relations`: `relate_planes` (a `PlanarRelation` or a
  `PlaneIntersection` carrying the shared `Line`), `relate_point_to_plane`
  (a `PointPlanarRelation`) and `relate_point_to_polygon` (a
  `PointPolygonRelation`, or `OnEdge` with the edge the point lies on).
- `prismatic.topology`: `Four` and `Three`, whose `parametric_faces`
  yield triangles in parameter space; `Four` also has
  `parametric_faces_t` and `parametric_faces_s`.
- `prismatic.tri_bezier`: `TriBezier`, a cubic Bézier triangle from ten
  control points, with `get_point` at barycentric coordinates, the
  Bernstein weights, and `polygonize` into triangles; and `uvw`.
- `prismatic.paths`: `Polyline`, paths joined end to end and parametrised
  by relative length (`get_t`, `as_segments`), and `SurfaceBetweenTwoPaths`
  (`get_point`, `inverse_surface`). Both take any objects providing
  `first()`, `last()`, `length()` and `get_t(t)`.
- `prismatic.shapes`: `Frame` (a centre and three axes, with `offset_x`,
  `offset_y`, `offset_z`), `Cylinder`, `PlaneGrid`, `Rect`, `RectBuilder`
  and `Align`. Each shape's `render()` returns a list of outlines, each a
  list of 3D points.

## Example

```python
import numpy as np

from prismatic.lines import Line, Segment
from prismatic.linear import relate_line_to_segment
from prismatic.plane import Plane
from prismatic.shapes import Frame, Rect

segment = Segment(np.array([1.0, 1.0, 1.0]), np.array([1.0, 1.0, -1.0]))
line = Line(np.array([1.0, 2.0, 0.5]), np.array([0.0, -1.0, 0.0]))
print(relate_line_to_segment(line, segment))   # an IntersectIn at (1, 1, 0.5)

plane = Plane.from_normal_and_point(np.array([0.0, 0.0, 1.0]), np.zeros(3))
print(plane.is_point_on_plane(np.array([3.0, 4.0, 0.0]), 1e-9))   # True

box = Rect.centered(Frame(), 2.0, 1.0, 1.0)
for outline in box.render():
    print(outline)
```

## What it does not do

There is no mesh container in this package: shapes and patches produce
outlines or `Polygon` lists, but nothing collects them into a mesh, indexes
shared vertices, or writes them to a file format such as STL. There is no
command-line tool.