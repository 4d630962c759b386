"""Plain geometric records: Bezier and B-spline curves and surfaces, meshes, arcs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .uv import UV
from .xyz import XYZ
from .xyzw import XYZW

T = TypeVar("T")


@dataclass
class BezierCurve(Generic[T]):
    """A Bezier curve of the given degree with degree + 1 control points."""

    degree: int
    control_points: list[T] = field(default_factory=list)


@dataclass
class BezierSurface(Generic[T]):
    """A Bezier patch; control points are rows along u, each row running along v."""

    degree_u: int
    degree_v: int
    control_points: list[list[T]] = field(default_factory=list)


@dataclass
class BsplineCurve(Generic[T]):
    """A B-spline curve; rational when the control points are XYZW."""

    degree: int
    knot_vector: list[float] = field(default_factory=list)
    control_points: list[T] = field(default_factory=list)


@dataclass
class BsplineSurface(Generic[T]):
    """A tensor-product B-spline surface; rational when the control points are XYZW."""

    degree_u: int
    degree_v: int
    knot_vector_u: list[float] = field(default_factory=list)
    knot_vector_v: list[float] = field(default_factory=list)
    control_points: list[list[T]] = field(default_factory=list)


NurbsCurve = BsplineCurve[XYZW]
NurbsSurface = BsplineSurface[XYZW]


@dataclass
class Mesh:
    """An indexed polygon mesh with optional texture coordinates and normals."""

    vertices: list[XYZ] = field(default_factory=list)
    faces: list[list[int]] = field(default_factory=list)
    uvs: list[UV] = field(default_factory=list)
    uv_indices: list[int] = field(default_factory=list)
    normals: list[XYZ] = field(default_factory=list)
    normal_indices: list[int] = field(default_factory=list)


@dataclass
class ArcInfo:
    """Radius and center of a circular arc."""

    radius: float
    center: XYZ