[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nurbskit"
version = "0.1.0"
description = "Vector types, 4x4 transforms, Bezier evaluation, numeric helpers and in-place Fourier transforms for NURBS geometry."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["nurbs", "bezier", "b-spline", "geometry", "cad", "fft", "linear algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nurbskit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
