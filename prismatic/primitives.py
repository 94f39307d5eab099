"""Small helper primitives: points in planes and index iterators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from prismatic.plane import as_vector

LineIx = Tuple[int, int]


@dataclass(eq=False)
class PointInPlane:
    """A point lying in a plane with the given normal, with an optional direction."""

    point: np.ndarray
    normal: np.ndarray
    dir: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        self.point = as_vector(self.point)
        self.normal = as_vector(self.normal)
        if self.dir is not None:
            self.dir = as_vector(self.dir)


def index_pairs(size: int) -> Iterator[LineIx]:
    """Yield consecutive index pairs ``(0, 1), (1, 2), ...`` below ``size``."""
    for index in range(1, size):
        yield index - 1, index


def segments(count: int) -> Iterator[Tuple[float, float]]:
    """Split ``[0, 1]`` into ``count`` equal pieces, yielding their bounds."""
    for index in range(count):
        yield index / count, (index + 1) / count