"""Two-dimensional location, vector or offset in parameter space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .constants import DOUBLE_EPSILON
from .mathutils import is_almost_equal_to


@dataclass(frozen=True, slots=True)
class UV:
    """An immutable (u, v) pair supporting vector arithmetic."""

    u: float = 0.0
    v: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.u
        yield self.v

    def __getitem__(self, index: int) -> float:
        return (self.u, self.v)[index]

    def is_zero(self, epsilon: float = DOUBLE_EPSILON) -> bool:
        return self.sqr_length() <= epsilon * epsilon

    def is_unit(self, epsilon: float = DOUBLE_EPSILON) -> bool:
        return abs(self.sqr_length() - 1) < epsilon * epsilon

    def is_almost_equal_to(self, another: UV) -> bool:
        return is_almost_equal_to(self.u, another.u) and is_almost_equal_to(self.v, another.v)

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def sqr_length(self) -> float:
        return self.u * self.u + self.v * self.v

    def angle_to(self, another: UV) -> float:
        """Unsigned angle in radians; 0.0 when either vector is zero."""
        first = self.normalize()
        second = another.normalize()
        if first.is_zero() or second.is_zero():
            return 0.0
        return math.acos(max(-1.0, min(1.0, first.dot(second))))

    def normalize(self) -> UV:
        """A unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            inv = 1.0 / length
            return UV(self.u * inv, self.v * inv)
        return self

    def dot(self, another: UV) -> float:
        return self.u * another.u + self.v * another.v

    def cross(self, another: UV) -> float:
        """The scalar z component of the planar cross product."""
        return self.u * another.v - another.u * self.v

    def distance(self, another: UV) -> float:
        return math.hypot(another.u - self.u, another.v - self.v)

    def __add__(self, other: object) -> UV:
        if not isinstance(other, UV):
            return NotImplemented
        return UV(self.u + other.u, self.v + other.v)

    def __sub__(self, other: object) -> UV:
        if not isinstance(other, UV):
            return NotImplemented
        return UV(self.u - other.u, self.v - other.v)

    def __mul__(self, other: object):
        """Scalar multiple for a number, dot product for another UV."""
        if isinstance(other, UV):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return UV(self.u * other, self.v * other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, (int, float)):
            return UV(self.u * other, self.v * other)
        return NotImplemented

    def __truediv__(self, other: object) -> UV:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return UV(self.u / other, self.v / other)

    def __neg__(self) -> UV:
        return UV(-self.u, -self.v)

    def __xor__(self, other: object):
        if not isinstance(other, UV):
            return NotImplemented
        return self.cross(other)