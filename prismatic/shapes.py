"""Simple solids and surfaces rendered as lists of polygon outlines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List

import numpy as np

from prismatic.plane import as_vector
from prismatic.primitives import segments

Outline = List[np.ndarray]


def _axis(index: int) -> np.ndarray:
    axis = np.zeros(3)
    axis[index] = 1.0
    return axis


@dataclass(eq=False)
class Frame:
    """An origin with three axes that place a shape in space."""

    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    x: np.ndarray = field(default_factory=lambda: _axis(0))
    y: np.ndarray = field(default_factory=lambda: _axis(1))
    z: np.ndarray = field(default_factory=lambda: _axis(2))

    def __post_init__(self) -> None:
        self.center = as_vector(self.center)
        self.x = as_vector(self.x)
        self.y = as_vector(self.y)
        self.z = as_vector(self.z)

    def _moved(self, offset: np.ndarray) -> Frame:
        return replace(self, center=self.center + offset)

    def offset_x(self, amount: float) -> Frame:
        """The same frame moved ``amount`` along its x axis."""
        return self._moved(self.x * amount)

    def offset_y(self, amount: float) -> Frame:
        """The same frame moved ``amount`` along its y axis."""
        return self._moved(self.y * amount)

    def offset_z(self, amount: float) -> Frame:
        """The same frame moved ``amount`` along its z axis."""
        return self._moved(self.z * amount)


@dataclass
class Cylinder:
    """A cylinder hanging down from ``top_basis`` along its z axis."""

    top_basis: Frame
    height: float
    radius: float
    steps: int = 10
    top_cap: bool = True
    bottom_cap: bool = True

    @classmethod
    def centered(cls, origin: Frame, height: float, radius: float) -> Cylinder:
        return cls(origin.offset_z(height / 2), float(height), float(radius))

    @classmethod
    def with_top_at(cls, origin: Frame, height: float, radius: float) -> Cylinder:
        return cls(origin, float(height), float(radius))

    @classmethod
    def with_bottom_at(cls, origin: Frame, height: float, radius: float) -> Cylinder:
        return cls(origin.offset_z(height), float(height), float(radius))

    def render(self) -> List[Outline]:
        """Wall quads, then the top cap and the reversed bottom cap if enabled."""
        basis = self.top_basis
        drop = basis.z * self.height

        def rim(angle: float) -> np.ndarray:
            return (
                basis.center
                + basis.x * (math.cos(angle) * self.radius)
                + basis.y * (math.sin(angle) * self.radius)
            )

        top: Outline = []
        bottom: Outline = []
        outlines: List[Outline] = []
        for start, end in segments(self.steps):
            top_prev = rim(start * 2 * math.pi)
            top_next = rim(end * 2 * math.pi)
            bottom_prev = top_prev - drop
            bottom_next = top_next - drop
            outlines.append([bottom_prev, bottom_next, top_next, top_prev])
            top.append(top_prev)
            bottom.append(bottom_prev)

        if self.top_cap:
            outlines.append(top)
        if self.bottom_cap:
            outlines.append(bottom[::-1])
        return outlines


@dataclass
class PlaneGrid:
    """A flat rectangle centred on a frame, split into a grid of quads."""

    origin: Frame
    width: float
    height: float
    resolution: int

    @classmethod
    def centered(
        cls, origin: Frame, width: float, height: float, resolution: int
    ) -> PlaneGrid:
        return cls(origin, float(width), float(height), int(resolution))

    def render(self) -> List[Outline]:
        """One quad per grid cell, row by row along the frame's x axis."""
        o = self.origin
        corner = o.center - o.x * (self.width / 2) - o.y * (self.height / 2)
        quads: List[Outline] = []
        for s, ss in segments(self.resolution):
            ws = o.x * self.width * s
            wss = o.x * self.width * ss
            for t, tt in segments(self.resolution):
                # the grid steps along y by the width as well
                ht = o.y * self.width * t
                htt = o.y * self.width * tt
                quads.append(
                    [
                        corner + ws + ht,
                        corner + wss + ht,
                        corner + wss + htt,
                        corner + ws + htt,
                    ]
                )
        return quads


class Align(Enum):
    """Where the frame origin sits along one axis of a box."""

    NEG = "neg"
    POS = "pos"
    MIDDLE = "middle"


def _align(frame: Frame, align: Align, size: float, move) -> Frame:
    if align is Align.NEG:
        return move(frame, size / 2)
    if align is Align.POS:
        return move(frame, -size / 2)
    return frame


@dataclass
class RectBuilder:
    """Settings for a box; ``build`` places it according to the alignments."""

    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0
    origin: Frame = field(default_factory=Frame)
    align_x: Align = Align.MIDDLE
    align_y: Align = Align.MIDDLE
    align_z: Align = Align.MIDDLE

    def build(self) -> Rect:
        basis = _align(self.origin, self.align_x, self.width, Frame.offset_x)
        basis = _align(basis, self.align_y, self.height, Frame.offset_y)
        basis = _align(basis, self.align_z, self.depth, Frame.offset_z)
        return Rect(float(self.width), float(self.height), float(self.depth), basis)


@dataclass
class Rect:
    """A box centred on ``basis`` with extents along its x, y and z axes."""

    width: float
    height: float
    depth: float
    basis: Frame

    @classmethod
    def builder(cls) -> RectBuilder:
        return RectBuilder()

    @classmethod
    def centered(cls, origin: Frame, width: float, height: float, depth: float) -> Rect:
        return RectBuilder(width, height, depth, origin).build()

    @classmethod
    def with_top_at(
        cls, origin: Frame, width: float, height: float, depth: float
    ) -> Rect:
        return RectBuilder(width, height, depth, origin, align_z=Align.POS).build()

    @classmethod
    def with_bottom_at(
        cls, origin: Frame, width: float, height: float, depth: float
    ) -> Rect:
        return cls(float(width), float(height), float(depth), origin.offset_z(depth / 2))

    def render(self) -> List[Outline]:
        """The six faces: top, bottom, right, left, near and far."""
        c = self.basis.center
        ww = self.basis.x * (self.width / 2)
        hh = self.basis.y * (self.height / 2)
        dd = self.basis.z * (self.depth / 2)

        top = [c + hh + ww - dd, c + hh - ww - dd, c + hh - ww + dd, c + hh + ww + dd]
        bottom = [c - hh - ww + dd, c - hh - ww - dd, c - hh + ww - dd, c - hh + ww + dd]
        left = [c - ww + hh + dd, c - ww + hh - dd, c - ww - hh - dd, c - ww - hh + dd]
        right = [c + ww - hh + dd, c + ww - hh - dd, c + ww + hh - dd, c + ww + hh + dd]
        near = [c - dd - hh + ww, c - dd - hh - ww, c - dd + hh - ww, c - dd + hh + ww]
        far = [c + dd + hh + ww, c + dd + hh - ww, c + dd - hh - ww, c + dd - hh + ww]
        return [top, bottom, right, left, near, far]