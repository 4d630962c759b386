"""Tolerant float comparisons, small combinatorics and dense matrix helpers."""

from __future__ import annotations

import math
import sys
from typing import Sequence, TypeVar

import numpy as np

from .constants import DOUBLE_EPSILON, PI

T = TypeVar("T")

Matrix = list[list[float]]


def is_nan(value: float) -> bool:
    return value != value


def is_almost_equal_to(value1: float, value2: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    """Relative-absolute comparison scaled by the magnitudes of both values."""
    if is_nan(value1) or is_nan(value2):
        return False
    eps = (abs(value1) + abs(value2) + 10) * tolerance
    delta = value1 - value2
    return -eps < delta < eps


def is_greater_than(value1: float, value2: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    if is_nan(value1) or is_nan(value2):
        return False
    return value1 > value2 and not is_almost_equal_to(value1, value2, tolerance)


def is_greater_than_or_equal(value1: float, value2: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    if is_nan(value1) or is_nan(value2):
        return False
    return (value1 - value2 > tolerance) or is_almost_equal_to(value1, value2, tolerance)


def is_less_than(value1: float, value2: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    if is_nan(value1) or is_nan(value2):
        return False
    return value1 < value2 and not is_almost_equal_to(value1, value2, tolerance)


def is_less_than_or_equal(value1: float, value2: float, tolerance: float = DOUBLE_EPSILON) -> bool:
    if is_nan(value1) or is_nan(value2):
        return False
    return value1 < value2 or is_almost_equal_to(value1, value2, tolerance)


def is_infinite(value: float) -> bool:
    """True for infinities and NaN, i.e. anything outside the finite float range."""
    max_value = sys.float_info.max
    return not (-max_value <= value <= max_value)


def radians_to_angle(radians: float) -> float:
    return radians * 180.0 / PI


def angle_to_radians(angle: float) -> float:
    return angle * PI / 180.0


def factorial(number: int) -> int:
    """n! for a non-negative integer; raises ValueError for negative input."""
    if number < 0:
        raise ValueError("Factorial is undefined for negative numbers.")
    return math.factorial(number)


def binomial(number: int, i: int) -> float:
    """Binomial coefficient C(number, i) computed from factorials."""
    return float(factorial(number) // (factorial(i) * factorial(number - i)))


def solve_cubic(cubic: float, quadratic: float, linear: float, constant: float) -> float:
    """Find a real root of a cubic by Newton iteration started at 0.001."""

    def step(x: float) -> float:
        value = cubic * x**3 + quadratic * x**2 + linear * x + constant
        slope = 3 * cubic * x**2 + 2 * quadratic * x + linear
        if slope == 0:
            return math.nan
        return x - value / slope

    initial = 0.001
    result = step(initial)
    while is_greater_than(abs(result - initial), DOUBLE_EPSILON):
        if is_infinite(result):
            return math.nan
        initial = result
        result = step(initial)
    return result


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    return [list(column) for column in zip(*matrix)]


def get_column(matrix: Sequence[Sequence[T]], column_index: int) -> list[T]:
    return [row[column_index] for row in matrix]


def _to_array(matrix: Sequence[Sequence[float]]) -> np.ndarray:
    return np.asarray(matrix, dtype=float)


def matrix_multiply(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Matrix:
    return (_to_array(left) @ _to_array(right)).tolist()


def make_diagonal(size: int) -> Matrix:
    """The identity matrix of the given size."""
    return np.eye(size).tolist()


def create_matrix(rows: int, columns: int) -> Matrix:
    return [[0.0] * columns for _ in range(rows)]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    array = _to_array(matrix)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError("Determinant requires a square matrix.")
    return float(np.linalg.det(array))


def make_inverse(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Inverse of a square matrix; raises ValueError if non-square or singular."""
    array = _to_array(matrix)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError("Only square matrices can be inverted.")
    try:
        return np.linalg.inv(array).tolist()
    except np.linalg.LinAlgError as error:
        raise ValueError("Matrix is singular.") from error


def solve_linear_system(matrix: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Matrix:
    """Solve matrix @ result = right for result."""
    try:
        return np.linalg.solve(_to_array(matrix), _to_array(right)).tolist()
    except np.linalg.LinAlgError as error:
        raise ValueError(str(error)) from error