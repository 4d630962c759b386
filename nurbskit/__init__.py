"""Vector types, 4x4 transforms, numeric helpers, Bezier evaluation and in-place Fourier transforms."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "enums",
    "mathutils",
    "uv",
    "xyz",
    "xyzw",
    "matrix4d",
    "objects",
    "bezier",
    "fft",
]