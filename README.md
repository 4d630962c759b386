# nurbskit

Building blocks for NURBS geometry in Python. The package provides 2D, 3D and
homogeneous vector types, a 4×4 transformation matrix, tolerant float
comparisons and small matrix helpers, records for Bezier and B-spline
geometry, de Casteljau evaluation of Bezier curves and surfaces, and in-place
fast Fourier, cosine and sine transforms.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

The only runtime dependency is `numpy`.

## Modules

### `nurbskit.constants`

Tolerances `DOUBLE_EPSILON` (1e-6), `DISTANCE_EPSILON` (1e-4),
`ANGLE_EPSILON` (1e-2), `MAX_DISTANCE` (1e9), `PI` and `NURBS_MAX_DEGREE` (7).

- `validate_argument(condition, name, message)` raises `ValueError` when
  `condition` is false. The message carries the text and the parameter name.
- `validate_argument_range(value, minimum, maximum, name)` raises `ValueError`
  when `value` lies outside `[minimum, maximum]` by more than `DOUBLE_EPSILON`.
  Otherwise it returns `value`.

### `nurbskit.enums`

These are integer enumerations:

- `CurveCurveIntersectionType`
- `LinePlaneIntersectionType`
- `CurveNormal`
- `SurfaceDirection`
- `SurfaceCurvature`
- `IntegratorType`
- `OffsetType`

### `nurbskit.mathutils`

- Tolerant comparisons: `is_almost_equal_to`, `is_greater_than`,
  `is_greater_than_or_equal`, `is_less_than` and `is_less_than_or_equal`.
  - The tolerance defaults to `DOUBLE_EPSILON`.
  - Equality uses a tolerance scaled by the size of both values.
  - Any comparison that involves NaN is false.
- `is_nan` and `is_infinite`. `is_infinite` is also true for NaN.
- `radians_to_angle` and `angle_to_radians`.
- `factorial` raises `ValueError` for negative input. `binomial` returns a float.
- `solve_cubic(cubic, quadratic, linear, constant)` finds a real root by Newton
  iteration, starting from 0.001.
- Matrix helpers on lists of lists:
  - `transpose`
  - `get_column`
  - `matrix_multiply`
  - `make_diagonal`, which gives the identity matrix
  - `create_matrix`, which gives a zero matrix
  - `determinant`
  - `make_inverse`, which raises `ValueError` for a non-square or singular matrix
  - `solve_linear_system(matrix, right)`, which solves `matrix @ result = right`
    and raises `ValueError` when the system cannot be solved

### `nurbskit.uv`, `nurbskit.xyz`, `nurbskit.xyzw`

`UV`, `XYZ` and `XYZW` are immutable dataclasses. You can iterate over them and
index them.

`UV` and `XYZ` support:

- `+`, `-`, unary `-`, and `/` by a number
- `*` by a number (scalar multiple) and `*` by a vector of the same type (dot product)
- `^` for the cross product: a scalar for `UV`, an `XYZ` for `XYZ`
- the methods `is_zero`, `is_unit`, `is_almost_equal_to`, `length`,
  `sqr_length`, `angle_to`, `normalize`, `dot`, `cross` and `distance`

`normalize` returns a zero vector unchanged. `angle_to` returns 0.0 when either
vector is zero.

`XYZ.create_random_orthogonal(xyz)` returns a random unit vector perpendicular
to `xyz`.

`XYZW` holds a weighted point `(wx, wy, wz, w)`. It provides:

- `from_xyz(xyz, w)`, which multiplies the coordinates by the weight
- `with_weight(w)`, which keeps the cartesian point and changes the weight
- `to_xyz(divide_weight=True)`, which leaves the coordinates undivided when the weight is near zero
- `is_almost_equal_to`, which compares the projected points
- `distance`
- `+`, `-`, `*` by a number, and `/` by a number

### `nurbskit.matrix4d`

`Matrix4d` is a mutable 4×4 matrix that acts on column vectors. `Matrix4d()` is
the identity. `Matrix4d(rows)` takes four rows of four values.

Constructors:

- `from_basis`
- `create_reflection`
- `create_rotation`
- `create_rotation_at_point`
- `create_translation`
- `create_scale`

Elements:

- `m[row, column]` reads or writes one element.
- `m[row]` returns a row as a tuple.
- `basis_x`, `basis_y`, `basis_z` and `basis_w` are properties that return the columns as `XYZ`.
- `tolist()` returns the rows as lists.

Operations:

- `@` and `*` compose matrices. `+` and `-` work element by element. `==` compares exactly.
- `of_point` applies translation and the projective divide.
- `of_weighted_point` keeps the weight.
- `of_vector` ignores translation.
- `inverse()` raises `ValueError` when the matrix is singular.
- `transpose`, `scale_factors` and `determinant`.
- `is_identity`, `has_reflection` and `is_translation`.

### `nurbskit.objects`

Dataclass records:

- `BezierCurve`
- `BezierSurface`
- `BsplineCurve`
- `BsplineSurface`
- `Mesh`
- `ArcInfo`

`NurbsCurve` and `NurbsSurface` are aliases for the B-spline records with
`XYZW` control points.

### `nurbskit.bezier`

- `check_curve` and `check_surface` raise `ValueError` when the degree or the
  control-point layout is invalid.
- `point_on_curve_by_de_casteljau(curve, t)` evaluates a curve at `t` in [0, 1].
- `point_on_surface_by_de_casteljau(surface, uv)` evaluates a surface at `u` and
  `v` in [0, 1]. Rows of the control net run along v.

A parameter outside [0, 1] raises `ValueError`. Control points can be `XYZ`,
`XYZW` (rational geometry; the result is a weighted point) or plain floats.

### `nurbskit.fft`

`cdft`, `rdft`, `ddct`, `ddst`, `dfct` and `dfst` transform a mutable list of
floats in place. Data lengths must be powers of two. The sign of the `wi`
argument selects the forward or inverse direction. The module docstring gives
the exact definitions and calling conventions.

## Example

```python
from nurbskit.xyz import XYZ
from nurbskit.objects import BezierCurve
from nurbskit.bezier import point_on_curve_by_de_casteljau
from nurbskit.matrix4d import Matrix4d

curve = BezierCurve(degree=2, control_points=[XYZ(0, 0, 0), XYZ(1, 1, 0), XYZ(2, 0, 0)])
mid = point_on_curve_by_de_casteljau(curve, 0.5)   # XYZ(x=1.0, y=0.5, z=0.0)

move = Matrix4d.create_translation(XYZ(0, 0, 5))
print(move.of_point(mid))                          # XYZ(x=1.0, y=0.5, z=5.0)

turn = Matrix4d.create_rotation(XYZ(0, 0, 1), 3.14159265358979 / 2)
combined = move @ turn
```

## What the package does not do

The `BsplineCurve`, `BsplineSurface`, `NurbsCurve` and `NurbsSurface` records
are plain data. The package has no functions for B-spline or NURBS operations:

- evaluation
- derivatives
- knot insertion or removal
- degree elevation
- interpolation or approximation
- intersection
- projection
- integration or arc length
- tessellation or triangulation

Bezier geometry is evaluated only by de Casteljau's algorithm.

## Running the tests

```
pytest
```