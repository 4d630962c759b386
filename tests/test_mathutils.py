import math

import pytest

from nurbskit import mathutils as mu
from nurbskit.constants import DOUBLE_EPSILON, PI


def test_almost_equal_within_scaled_tolerance():
    assert mu.is_almost_equal_to(1.0, 1.0 + DOUBLE_EPSILON)
    assert not mu.is_almost_equal_to(1.0, 1.1)


def test_nan_comparisons_are_false():
    nan = float("nan")
    assert not mu.is_almost_equal_to(nan, nan)
    assert not mu.is_greater_than(nan, 0.0)
    assert not mu.is_less_than_or_equal(nan, 0.0)
    assert mu.is_nan(nan)
    assert not mu.is_nan(0.5)


def test_ordering_helpers():
    assert mu.is_greater_than(2.0, 1.0)
    assert not mu.is_greater_than(1.0, 1.0 + DOUBLE_EPSILON)
    assert mu.is_greater_than_or_equal(1.0, 1.0)
    assert mu.is_less_than(1.0, 2.0)
    assert not mu.is_less_than(1.0, 1.0)
    assert mu.is_less_than_or_equal(1.0, 1.0)
    assert not mu.is_less_than_or_equal(2.0, 1.0)


def test_is_infinite():
    assert mu.is_infinite(float("inf"))
    assert mu.is_infinite(float("-inf"))
    assert mu.is_infinite(float("nan"))
    assert not mu.is_infinite(1e308)


def test_angle_conversions():
    assert mu.radians_to_angle(PI) == pytest.approx(180.0)
    for value in (0.3, -1.2, 2.5):
        assert mu.angle_to_radians(mu.radians_to_angle(value)) == pytest.approx(value)


def test_factorial_recurrence_and_negative():
    for n in range(1, 10):
        assert mu.factorial(n) == n * mu.factorial(n - 1)
    with pytest.raises(ValueError):
        mu.factorial(-1)


def test_binomial_symmetry_and_row_sum():
    for n in range(0, 9):
        row = [mu.binomial(n, i) for i in range(n + 1)]
        assert row == row[::-1]
        assert sum(row) == 2**n


def test_solve_cubic_finds_root():
    root = mu.solve_cubic(1.0, 0.0, 0.0, -2.0)
    assert root**3 == pytest.approx(2.0, abs=1e-5)
    root = mu.solve_cubic(2.0, -3.0, 1.0, -5.0)
    assert 2 * root**3 - 3 * root**2 + root - 5 == pytest.approx(0.0, abs=1e-4)


def test_transpose_and_get_column():
    matrix = [[1, 2, 3], [4, 5, 6]]
    transposed = mu.transpose(matrix)
    assert transposed[1] == mu.get_column(matrix, 1)
    assert mu.transpose(transposed) == matrix


def test_identity_and_zero_matrix():
    ident = mu.make_diagonal(3)
    matrix = [[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [1.0, 0.0, 6.0]]
    assert mu.matrix_multiply(ident, matrix) == matrix
    assert mu.matrix_multiply(matrix, ident) == matrix
    zeros = mu.create_matrix(2, 3)
    assert len(zeros) == 2 and all(row == [0.0, 0.0, 0.0] for row in zeros)


def test_determinant_is_multiplicative():
    a = [[2.0, 1.0], [1.0, 3.0]]
    b = [[1.0, 4.0], [2.0, 1.0]]
    product = mu.matrix_multiply(a, b)
    assert mu.determinant(product) == pytest.approx(mu.determinant(a) * mu.determinant(b))
    assert mu.determinant(mu.make_diagonal(4)) == pytest.approx(1.0)


def test_inverse_round_trip():
    matrix = [[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]]
    inverse = mu.make_inverse(matrix)
    product = mu.matrix_multiply(matrix, inverse)
    identity = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert len(product) == 3
    for row, expected in zip(product, identity):
        assert row == pytest.approx(expected, abs=1e-9)


def test_inverse_rejects_bad_input():
    with pytest.raises(ValueError):
        mu.make_inverse([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    with pytest.raises(ValueError):
        mu.make_inverse([[1.0, 2.0], [2.0, 4.0]])


def test_solve_linear_system_satisfies_equation():
    matrix = [[3.0, 2.0, -1.0], [2.0, -2.0, 4.0], [-1.0, 0.5, -1.0]]
    right = [[1.0, 0.0], [-2.0, 1.0], [0.0, 2.0]]
    result = mu.solve_linear_system(matrix, right)
    assert len(result) == 3
    assert not math.isnan(result[0][0])
    product = mu.matrix_multiply(matrix, result)
    for row, expected in zip(product, right):
        assert row == pytest.approx(expected, abs=1e-9)