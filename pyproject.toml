[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kiammath"
version = "0.1.0"
description = "Small numerical toolkit: 2D vectors, points, boxes and matrices, block arrays, 3D grids, a portable random generator and a Cholesky factorisation."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "geometry", "random", "cholesky", "array"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kiammath"]

[tool.pytest.ini_options]
addopts = "-ra"
