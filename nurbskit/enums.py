"""Enumerations describing geometric query kinds and results."""

from __future__ import annotations

from enum import IntEnum


class CurveCurveIntersectionType(IntEnum):
    INTERSECTING = 0
    PARALLEL = 1
    COINCIDENT = 2
    SKEW = 3


class LinePlaneIntersectionType(IntEnum):
    INTERSECTING = 0
    PARALLEL = 1
    ON = 2


class CurveNormal(IntEnum):
    NORMAL = 0
    BINORMAL = 1


class SurfaceDirection(IntEnum):
    ALL = 0
    U_DIRECTION = 1
    V_DIRECTION = 2


class SurfaceCurvature(IntEnum):
    MAXIMUM = 0
    MINIMUM = 1
    GAUSS = 2
    MEAN = 3
    ABS = 4
    RMS = 5


class IntegratorType(IntEnum):
    SIMPSON = 0
    GAUSS_LEGENDRE = 1
    CHEBYSHEV = 2


class OffsetType(IntEnum):
    """Curve offset algorithm.

    TILLER_AND_HANSON suits C0 profiles and is applied iteratively with
    subdivision; it behaves poorly for negative offsets and high degrees.
    PIEGL_AND_TILLER suits high-degree profiles.
    """

    TILLER_AND_HANSON = 0
    PIEGL_AND_TILLER = 1