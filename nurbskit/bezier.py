"""Point evaluation on Bezier curves and surfaces by the de Casteljau algorithm.

Control points may be any values that support addition and multiplication by a
float: XYZ for polynomial curves, XYZW for rational ones, or plain floats.
"""

from __future__ import annotations

from typing import Any

from .constants import validate_argument, validate_argument_range
from .objects import BezierCurve, BezierSurface
from .uv import UV


def check_curve(curve: BezierCurve[Any]) -> None:
    """Raise ValueError unless *curve* has a positive degree and degree + 1 control points."""
    validate_argument(curve.degree > 0, "degree", "Degree must be greater than zero.")
    validate_argument(
        len(curve.control_points) > 0,
        "controlPoints",
        "ControlPoints must contain one point at least.",
    )
    validate_argument(
        len(curve.control_points) == curve.degree + 1,
        "controlPoints",
        "ControlPoints count equals degree plus one.",
    )


def _de_casteljau(points: list[Any], degree: int, t: float) -> Any:
    """Repeated linear interpolation over the first degree + 1 points."""
    current = points[: degree + 1]
    for _ in range(degree):
        current = [(1.0 - t) * a + t * b for a, b in zip(current, current[1:])]
    return current[0]


def point_on_curve_by_de_casteljau(curve: BezierCurve[Any], t: float) -> Any:
    """The point of *curve* at parameter *t* in [0, 1].

    For a rational curve with XYZW control points the result is the weighted
    point; project it with ``to_xyz()``.
    """
    validate_argument_range(t, 0.0, 1.0, "t")
    return _de_casteljau(list(curve.control_points), curve.degree, t)


def check_surface(surface: BezierSurface[Any]) -> None:
    """Raise ValueError unless the control net is (degree_u + 1) x (degree_v + 1)."""
    validate_argument(surface.degree_u > 0, "degreeU", "Degree must be greater than zero.")
    validate_argument(surface.degree_v > 0, "degreeV", "Degree must be greater than zero.")
    points = surface.control_points
    validate_argument(
        len(points) > 0,
        "controlPoints",
        "ControlPoints must contain one point at least.",
    )
    validate_argument(
        surface.degree_u + 1 == len(points),
        "controlPoints",
        "ControlPoints row size equals degreeU plus one.",
    )
    validate_argument(
        surface.degree_v + 1 == len(points[0]),
        "controlPoints",
        "ControlPoints column size equals degreeV plus one.",
    )


def point_on_surface_by_de_casteljau(surface: BezierSurface[Any], uv: UV) -> Any:
    """The point of *surface* at (u, v), both in [0, 1].

    Rows of the control net run along v; the row results are then combined along u.
    """
    validate_argument_range(uv.u, 0.0, 1.0, "u")
    validate_argument_range(uv.v, 0.0, 1.0, "v")
    row_points = [
        _de_casteljau(list(row), surface.degree_v, uv.v)
        for row in surface.control_points[: surface.degree_u + 1]
    ]
    return _de_casteljau(row_points, surface.degree_u, uv.u)