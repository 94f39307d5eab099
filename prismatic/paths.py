"""Chains of paths and surfaces spanned between two paths."""

from __future__ import annotations

import math
from typing import Iterator, List, Protocol, Sequence, Tuple

import numpy as np

from prismatic.plane import as_vector


class Path(Protocol):
    """A parametric curve over ``[0, 1]``."""

    def first(self) -> np.ndarray: ...

    def last(self) -> np.ndarray: ...

    def length(self) -> float: ...

    def get_t(self, t: float) -> np.ndarray: ...


class Polyline:
    """Paths joined end to end, parametrised by relative length."""

    def __init__(self, items: Sequence[Path]) -> None:
        items = list(items)
        for item, following in zip(items, items[1:]):
            if not np.array_equal(as_vector(item.last()), as_vector(following.first())):
                raise ValueError("path items not chained")
        lengths = [float(item.length()) for item in items]
        total = sum(lengths)
        if items and total == 0.0:
            raise ValueError("polyline has zero length")
        self._items: List[Path] = items
        self._lengths: List[float] = [length / total for length in lengths]

    def __len__(self) -> int:
        return len(self._items)

    def get_t(self, t: float) -> np.ndarray:
        """The point at relative length ``t`` along the polyline."""
        if not 0.0 <= t <= 1.0:
            raise ValueError("t shall be between 0 and 1")
        if not self._items:
            raise ValueError("t is still too big, impossible to get item vector")
        rest = t
        for item, length in zip(self._items, self._lengths):
            if rest > length:
                rest -= length
            else:
                return as_vector(item.get_t(rest / length if length else 0.0))
        # only rounding leftovers reach here
        return as_vector(self._items[-1].get_t(1.0))

    def as_segments(self, segments: int) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        """Approximate the polyline with straight pieces, at least one per item."""
        start = 0.0
        if segments <= len(self._lengths):
            for length in self._lengths:
                end = min(start + length, 1.0)
                yield self.get_t(start), self.get_t(end)
                start = end
            return
        average = 1.0 / segments
        for length in self._lengths:
            count = max(1, math.floor(length / average))
            piece = length / count
            for k in range(count):
                yield (
                    self.get_t(min(start + k * piece, 1.0)),
                    self.get_t(min(start + (k + 1) * piece, 1.0)),
                )
            start = min(start + length, 1.0)


class SurfaceBetweenTwoPaths:
    """The ruled surface joining corresponding points of two paths."""

    def __init__(self, left: Path, right: Path) -> None:
        self.left = left
        self.right = right

    def get_point(self, par) -> np.ndarray:
        """Point at ``par[0]`` along both paths, ``par[1]`` of the way left to right."""
        t, s = (float(c) for c in par)
        left = as_vector(self.left.get_t(t))
        right = as_vector(self.right.get_t(t))
        return left + (right - left) * s

    def inverse_surface(self) -> SurfaceBetweenTwoPaths:
        """The same surface with the two paths swapped."""
        return SurfaceBetweenTwoPaths(self.right, self.left)