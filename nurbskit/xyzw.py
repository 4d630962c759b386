"""Homogeneous (weighted) four-dimensional coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .mathutils import is_almost_equal_to
from .xyz import XYZ


@dataclass(frozen=True, slots=True)
class XYZW:
    """An immutable weighted point (wx, wy, wz, w)."""

    wx: float = 0.0
    wy: float = 0.0
    wz: float = 0.0
    w: float = 0.0

    @staticmethod
    def from_xyz(xyz: XYZ, w: float) -> XYZW:
        """Weight a cartesian point: coordinates are multiplied by *w*."""
        return XYZW(xyz.x * w, xyz.y * w, xyz.z * w, w)

    def with_weight(self, w: float) -> XYZW:
        """The same cartesian point carried with a new weight."""
        return XYZW.from_xyz(self.to_xyz(True), w)

    def to_xyz(self, divide_weight: bool = True) -> XYZ:
        """Project to cartesian space; a weight near zero leaves coordinates undivided."""
        if divide_weight and not is_almost_equal_to(self.w, 0.0):
            return XYZ(self.wx / self.w, self.wy / self.w, self.wz / self.w)
        return XYZ(self.wx, self.wy, self.wz)

    def is_almost_equal_to(self, another: XYZW) -> bool:
        """Compare the projected cartesian points."""
        return self.to_xyz(True).is_almost_equal_to(another.to_xyz(True))

    def distance(self, another: XYZW) -> float:
        return math.sqrt(sum((b - a) ** 2 for a, b in zip(self, another)))

    def __iter__(self) -> Iterator[float]:
        yield self.wx
        yield self.wy
        yield self.wz
        yield self.w

    def __getitem__(self, index: int) -> float:
        return (self.wx, self.wy, self.wz, self.w)[index]

    def __add__(self, other: object) -> XYZW:
        if not isinstance(other, XYZW):
            return NotImplemented
        return XYZW(self.wx + other.wx, self.wy + other.wy, self.wz + other.wz, self.w + other.w)

    def __sub__(self, other: object) -> XYZW:
        if not isinstance(other, XYZW):
            return NotImplemented
        return XYZW(self.wx - other.wx, self.wy - other.wy, self.wz - other.wz, self.w - other.w)

    def __mul__(self, other: object) -> XYZW:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return XYZW(self.wx * other, self.wy * other, self.wz * other, self.w * other)

    def __rmul__(self, other: object) -> XYZW:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> XYZW:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return XYZW(self.wx / other, self.wy / other, self.wz / other, self.w / other)