"""4x4 matrices for affine and projective model transformations, T(x) = M * x."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from .mathutils import determinant as _determinant
from .mathutils import is_almost_equal_to, is_less_than, make_inverse
from .xyz import XYZ
from .xyzw import XYZW

_SIZE = 4


def _identity_rows() -> list[list[float]]:
    return [[1.0 if row == column else 0.0 for column in range(_SIZE)] for row in range(_SIZE)]


class Matrix4d:
    """A mutable 4x4 matrix of floats acting on column vectors [x y z w]."""

    __slots__ = ("_rows",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        """Build from four rows of four numbers; the identity when *rows* is omitted."""
        if rows is None:
            self._rows = _identity_rows()
            return
        copied = [[float(value) for value in row] for row in rows]
        if len(copied) != _SIZE or any(len(row) != _SIZE for row in copied):
            raise ValueError("Matrix4d requires exactly four rows of four values.")
        self._rows = copied

    @staticmethod
    def from_basis(basis_x: XYZ, basis_y: XYZ, basis_z: XYZ, origin: XYZ) -> Matrix4d:
        """A matrix whose first three columns are the bases and whose last is the origin."""
        columns = (basis_x, basis_y, basis_z, origin)
        rows = [[column[row] for column in columns] for row in range(3)]
        rows.append([0.0, 0.0, 0.0, 1.0])
        return Matrix4d(rows)

    @staticmethod
    def create_reflection(normal: XYZ, distance_from_origin: float = 0.0) -> Matrix4d:
        """Reflection through the plane with the given normal and distance from the origin."""
        n = normal.normalize()
        x, y, z = n.x, n.y, n.z
        d = distance_from_origin
        return Matrix4d(
            [
                [-2 * x * x + 1, -2 * y * x, -2 * z * x, -2 * x * d],
                [-2 * x * y, -2 * y * y + 1, -2 * z * y, -2 * y * d],
                [-2 * x * z, -2 * y * z, -2 * z * z + 1, -2 * z * d],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation(axis: XYZ, rad: float) -> Matrix4d:
        """Rotation by *rad* radians about *axis* through the origin (Rodrigues' formula)."""
        c = math.cos(rad)
        s = math.sin(rad)
        t = 1.0 - c
        n = axis.normalize()
        x, y, z = n.x, n.y, n.z
        return Matrix4d(
            [
                [c + x * x * t, x * y * t - z * s, x * z * t + y * s, 0.0],
                [y * x * t + z * s, c + y * y * t, y * z * t - x * s, 0.0],
                [z * x * t - y * s, z * y * t + x * s, c + z * z * t, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def create_rotation_at_point(origin: XYZ, axis: XYZ, rad: float) -> Matrix4d:
        """Rotation by *rad* radians about *axis* passing through *origin*."""
        rotation = Matrix4d.create_rotation(axis, rad)
        offset = origin - rotation.of_vector(origin)
        for row, value in enumerate(offset):
            rotation[row, 3] = value
        return rotation

    @staticmethod
    def create_translation(vector: XYZ) -> Matrix4d:
        result = Matrix4d()
        for row, value in enumerate(vector):
            result[row, 3] = value
        return result

    @staticmethod
    def create_scale(scale: XYZ) -> Matrix4d:
        result = Matrix4d()
        for index, value in enumerate(scale):
            result[index, index] = value
        return result

    def _column(self, column: int) -> XYZ:
        return XYZ(self._rows[0][column], self._rows[1][column], self._rows[2][column])

    @property
    def basis_x(self) -> XYZ:
        return self._column(0)

    @property
    def basis_y(self) -> XYZ:
        return self._column(1)

    @property
    def basis_z(self) -> XYZ:
        return self._column(2)

    @property
    def basis_w(self) -> XYZ:
        """The translation column."""
        return self._column(3)

    def __getitem__(self, key):
        """Element at (row, column), or a whole row as a tuple for an integer index."""
        if isinstance(key, tuple):
            row, column = key
            return self._rows[row][column]
        return tuple(self._rows[key])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = key
        self._rows[row][column] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._rows)

    def tolist(self) -> list[list[float]]:
        return [list(row) for row in self._rows]

    def __matmul__(self, other: object) -> Matrix4d:
        if not isinstance(other, Matrix4d):
            return NotImplemented
        columns = list(zip(*other._rows))
        return Matrix4d(
            [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self._rows]
        )

    def __mul__(self, other: object) -> Matrix4d:
        if not isinstance(other, Matrix4d):
            return NotImplemented
        return self @ other

    def __add__(self, other: object) -> Matrix4d:
        if not isinstance(other, Matrix4d):
            return NotImplemented
        return Matrix4d(
            [[a + b for a, b in zip(left, right)] for left, right in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> Matrix4d:
        if not isinstance(other, Matrix4d):
            return NotImplemented
        return Matrix4d(
            [[a - b for a, b in zip(left, right)] for left, right in zip(self._rows, other._rows)]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4d):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix4d({self._rows!r})"

    def of_point(self, point: XYZ) -> XYZ:
        """Transform a point, including translation and the projective divide."""
        x, y, z, w = (row[0] * point.x + row[1] * point.y + row[2] * point.z + row[3] for row in self._rows)
        return XYZ(x, y, z) / w

    def of_weighted_point(self, point: XYZW) -> XYZW:
        """Transform the cartesian position of a weighted point, keeping its weight."""
        w = point.w
        current = XYZ(point.wx / w, point.wy / w, point.wz / w)
        return XYZW.from_xyz(self.of_point(current), w)

    def of_vector(self, vector: XYZ) -> XYZ:
        """Transform a direction: the translation column is ignored."""
        x, y, z = (row[0] * vector.x + row[1] * vector.y + row[2] * vector.z for row in self._rows[:3])
        return XYZ(x, y, z)

    def inverse(self) -> Matrix4d:
        """The inverse matrix; raises ValueError when the matrix is singular."""
        return Matrix4d(make_inverse(self._rows))

    def transpose(self) -> Matrix4d:
        return Matrix4d([list(column) for column in zip(*self._rows)])

    def scale_factors(self) -> XYZ:
        """Lengths of the three basis columns."""
        return XYZ(self.basis_x.length(), self.basis_y.length(), self.basis_z.length())

    def determinant(self) -> float:
        return _determinant(self._rows)

    def is_identity(self) -> bool:
        rows = self._rows
        if not all(is_almost_equal_to(rows[i][i], 1) for i in range(3)):
            return False
        off_diagonal = sum(
            rows[i][j] for i in range(_SIZE) for j in range(_SIZE) if i != j
        )
        return is_almost_equal_to(off_diagonal, 0.0)

    def has_reflection(self) -> bool:
        """True when the basis columns form a left-handed frame."""
        return is_less_than(self.basis_x.cross(self.basis_y).dot(self.basis_z), 0.0)

    def is_translation(self) -> bool:
        rows = self._rows
        diagonal = all(is_almost_equal_to(rows[i][i], 1) for i in range(3))
        off_diagonal = (
            rows[0][1] + rows[0][2]
            + rows[1][0] + rows[1][2]
            + rows[2][0] + rows[2][1]
            + rows[3][0] + rows[3][1] + rows[3][2]
        )
        return diagonal and is_almost_equal_to(off_diagonal, 0.0)