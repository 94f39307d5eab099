"""Parametric topologies of surface patches and their triangulations."""

from __future__ import annotations

from typing import ClassVar, Iterator, Tuple

import numpy as np

from prismatic.primitives import segments

ParametricTriangle = Tuple[np.ndarray, np.ndarray, np.ndarray]


def _grid_triangles(t_count: int, s_count: int) -> Iterator[ParametricTriangle]:
    """Split the unit square into ``t_count`` by ``s_count`` cells of two triangles."""
    for t, tt in segments(t_count):
        for s, ss in segments(s_count):
            a = np.array([t, s])
            b = np.array([t, ss])
            c = np.array([tt, s])
            d = np.array([tt, ss])
            yield a, b, c
            yield b, d, c


class Four:
    """A four-sided patch parametrised over the unit square."""

    DIMS: ClassVar[int] = 2
    SIDES: ClassVar[int] = 4

    @staticmethod
    def parametric_faces() -> Iterator[ParametricTriangle]:
        """Triangles of a 5 by 5 grid over the unit square."""
        return _grid_triangles(5, 5)

    @staticmethod
    def parametric_faces_t() -> Iterator[ParametricTriangle]:
        """Triangles of five strips across the first parameter."""
        return _grid_triangles(5, 1)

    @staticmethod
    def parametric_faces_s() -> Iterator[ParametricTriangle]:
        """Triangles of five strips across the second parameter."""
        return _grid_triangles(1, 5)


class Three:
    """A three-sided patch parametrised by barycentric coordinates."""

    DIMS: ClassVar[int] = 1
    SIDES: ClassVar[int] = 3

    @staticmethod
    def parametric_faces() -> Iterator[ParametricTriangle]:
        """Three-sided patches provide no parametric grid."""
        return iter(())