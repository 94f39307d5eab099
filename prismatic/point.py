"""A point carrying an edge direction, with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np


def _vec(value) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


@dataclass(eq=False)
class SuperPoint:
    """A position in space together with the direction of the edge through it."""

    side_dir: np.ndarray
    point: np.ndarray

    def __post_init__(self) -> None:
        self.side_dir = _vec(self.side_dir)
        self.point = _vec(self.point)

    @property
    def position(self) -> np.ndarray:
        """The position of the point."""
        return self.point

    @position.setter
    def position(self, value) -> None:
        self.point = _vec(value)

    @property
    def edge_dir(self) -> np.ndarray:
        """The direction of the edge through the point."""
        return self.side_dir

    @classmethod
    def zero(cls) -> SuperPoint:
        return cls(np.zeros(3), np.zeros(3))

    @classmethod
    def one(cls) -> SuperPoint:
        return cls(np.ones(3), np.ones(3))

    def is_zero(self) -> bool:
        return not self.point.any() and not self.side_dir.any()

    def magnitude(self) -> float:
        """Euclidean length of the position."""
        x, y, z = self.point
        return math.sqrt(x * x + y * y + z * z)

    def __add__(self, other: SuperPoint) -> SuperPoint:
        if not isinstance(other, SuperPoint):
            return NotImplemented
        return SuperPoint(self.side_dir + other.side_dir, self.point + other.point)

    def __sub__(self, other: SuperPoint) -> SuperPoint:
        if not isinstance(other, SuperPoint):
            return NotImplemented
        return SuperPoint(self.side_dir - other.side_dir, self.point - other.point)

    def __mul__(self, other: Union[SuperPoint, float]) -> SuperPoint:
        if isinstance(other, SuperPoint):
            return SuperPoint(self.side_dir * other.side_dir, self.point * other.point)
        if isinstance(other, (int, float, np.number)):
            return SuperPoint(self.side_dir * other, self.point * other)
        return NotImplemented

    def __rmul__(self, other: float) -> SuperPoint:
        if isinstance(other, (int, float, np.number)):
            return SuperPoint(self.side_dir * other, self.point * other)
        return NotImplemented

    def __truediv__(self, other: Union[SuperPoint, float]) -> SuperPoint:
        if isinstance(other, SuperPoint):
            return SuperPoint(self.side_dir / other.side_dir, self.point / other.point)
        if isinstance(other, (int, float, np.number)):
            return SuperPoint(self.side_dir / other, self.point / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuperPoint):
            return NotImplemented
        return bool(
            np.array_equal(self.point, other.point)
            and np.array_equal(self.side_dir, other.side_dir)
        )

    __hash__ = None  # type: ignore[assignment]