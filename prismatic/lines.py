"""Lines, rays and segments, and where points lie relative to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import numpy as np

from prismatic.plane import STABILITY_ROUNDING, as_vector, normalize, round_dp


class PointOnLine(Enum):
    ON = "on"
    OUTSIDE = "outside"
    ORIGIN = "origin"


class PointRelation(Protocol):
    """Something that can say where a point lies relative to it."""

    def relate_point(self, point) -> PointOnLine: ...


def _is_negligible(vector: np.ndarray, places: int = STABILITY_ROUNDING) -> bool:
    return round_dp(float(vector @ vector), places) == 0.0


@dataclass(eq=False)
class Line:
    """An infinite line through ``origin`` along the unit vector ``dir``."""

    origin: np.ndarray
    dir: np.ndarray

    def __post_init__(self) -> None:
        self.origin = as_vector(self.origin)
        self.dir = as_vector(self.dir)

    def relate_point(self, point) -> PointOnLine:
        to = as_vector(point)
        t0 = float(self.dir @ (to - self.origin))
        maybe_to = self.origin + self.dir * t0
        if _is_negligible(to - self.origin):
            return PointOnLine.ORIGIN
        if _is_negligible(to - maybe_to):
            return PointOnLine.ON
        return PointOnLine.OUTSIDE


@dataclass(eq=False)
class Ray:
    """A half-line starting at ``origin`` along the unit vector ``dir``."""

    origin: np.ndarray
    dir: np.ndarray

    def __post_init__(self) -> None:
        self.origin = as_vector(self.origin)
        self.dir = as_vector(self.dir)

    def relate_point(self, point) -> PointOnLine:
        to = as_vector(point)
        t0 = round_dp(float(self.dir @ (to - self.origin)), STABILITY_ROUNDING)
        maybe_to = self.origin + self.dir * t0
        if not _is_negligible(to - maybe_to):
            return PointOnLine.OUTSIDE
        if t0 < 0:
            return PointOnLine.OUTSIDE
        if t0 == 0:
            return PointOnLine.ORIGIN
        return PointOnLine.ON


@dataclass(eq=False)
class Segment:
    """The straight piece between ``start`` and ``end``."""

    start: np.ndarray
    end: np.ndarray

    def __post_init__(self) -> None:
        self.start = as_vector(self.start)
        self.end = as_vector(self.end)

    def dir(self) -> np.ndarray:
        return self.end - self.start

    def to_line(self) -> Line:
        return Line(self.start, normalize(self.dir()))

    def relate_point(self, point) -> PointOnLine:
        to = as_vector(point)
        direction = self.dir()
        length = float(np.linalg.norm(direction))
        t0 = round_dp(
            float(normalize(direction) @ (to - self.start)) / length,
            STABILITY_ROUNDING - 5,
        )
        maybe_to = self.start + direction * t0
        if not _is_negligible(to - maybe_to):
            return PointOnLine.OUTSIDE
        if t0 < 0 or t0 > 1:
            return PointOnLine.OUTSIDE
        if t0 in (0.0, 1.0):
            return PointOnLine.ORIGIN
        return PointOnLine.ON

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return bool(
            np.array_equal(self.start, other.start) and np.array_equal(self.end, other.end)
        )

    __hash__ = None  # type: ignore[assignment]