"""Geometric primitives, relations, parametric patches and simple shapes for 3D meshing."""

__version__ = "0.1.0"

__all__ = [
    "point",
    "plane",
    "lines",
    "linear",
    "primitives",
    "polygon",
    "relations",
    "topology",
    "tri_bezier",
    "paths",
    "shapes",
]