"""Numeric tolerances shared across the package and argument validation helpers."""

from __future__ import annotations

DOUBLE_EPSILON: float = 1e-6
DISTANCE_EPSILON: float = 1e-4
ANGLE_EPSILON: float = 1e-2
MAX_DISTANCE: float = 1e9
PI: float = 3.14159265358979323846
NURBS_MAX_DEGREE: int = 7


def validate_argument(condition: bool, name: str, message: str) -> None:
    """Raise ValueError carrying *message* and the parameter *name* unless *condition* holds."""
    if not condition:
        raise ValueError(f"{message}\r\nParameter name: {name}")


def validate_argument_range(value: float, minimum: float, maximum: float, name: str) -> float:
    """Check that *value* lies in [minimum, maximum] up to DOUBLE_EPSILON.

    Returns the value unchanged; raises ValueError when it is out of range.
    """
    below = value < minimum and abs(value - minimum) > DOUBLE_EPSILON
    above = value > maximum and abs(value - maximum) > DOUBLE_EPSILON
    if below or above:
        raise ValueError(
            f"Argument is out of range[{minimum},{maximum}]\r\nParameter name: {name}"
        )
    return value