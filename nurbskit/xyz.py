"""Three-dimensional location, vector or offset."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator

from .constants import DOUBLE_EPSILON, PI
from .mathutils import is_almost_equal_to


@dataclass(frozen=True, slots=True)
class XYZ:
    """An immutable (x, y, z) triple supporting vector arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def is_zero(self, epsilon: float = DOUBLE_EPSILON) -> bool:
        return self.sqr_length() <= epsilon * epsilon

    def is_unit(self, epsilon: float = DOUBLE_EPSILON) -> bool:
        return abs(self.sqr_length() - 1) < epsilon * epsilon

    def is_almost_equal_to(self, another: XYZ) -> bool:
        return (
            is_almost_equal_to(self.x, another.x)
            and is_almost_equal_to(self.y, another.y)
            and is_almost_equal_to(self.z, another.z)
        )

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def angle_to(self, another: XYZ) -> float:
        """Unsigned angle in radians; 0.0 when either vector is zero."""
        first = self.normalize()
        second = another.normalize()
        if first.is_zero() or second.is_zero():
            return 0.0
        return math.acos(max(-1.0, min(1.0, first.dot(second))))

    def normalize(self) -> XYZ:
        """A unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            inv = 1.0 / length
            return XYZ(self.x * inv, self.y * inv, self.z * inv)
        return self

    def dot(self, another: XYZ) -> float:
        return self.x * another.x + self.y * another.y + self.z * another.z

    def cross(self, another: XYZ) -> XYZ:
        return XYZ(
            self.y * another.z - another.y * self.z,
            self.z * another.x - another.z * self.x,
            self.x * another.y - another.x * self.y,
        )

    def distance(self, another: XYZ) -> float:
        return math.sqrt(
            (another.x - self.x) ** 2 + (another.y - self.y) ** 2 + (another.z - self.z) ** 2
        )

    @staticmethod
    def create_random_orthogonal(xyz: XYZ) -> XYZ:
        """A unit vector perpendicular to *xyz* at a randomly chosen whole-radian angle."""
        normal = xyz.normalize()
        tangent = normal.cross(XYZ(-normal.z, normal.x, normal.y))
        bitangent = normal.cross(tangent)
        angle = random.randint(int(-PI), int(PI))
        return (tangent * math.sin(angle) + bitangent * math.cos(angle)).normalize()

    def __add__(self, other: object) -> XYZ:
        if not isinstance(other, XYZ):
            return NotImplemented
        return XYZ(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> XYZ:
        if not isinstance(other, XYZ):
            return NotImplemented
        return XYZ(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object):
        """Scalar multiple for a number, dot product for another XYZ."""
        if isinstance(other, XYZ):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return XYZ(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, (int, float)):
            return XYZ(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: object) -> XYZ:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return XYZ(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> XYZ:
        return XYZ(-self.x, -self.y, -self.z)

    def __xor__(self, other: object):
        if not isinstance(other, XYZ):
            return NotImplemented
        return self.cross(other)