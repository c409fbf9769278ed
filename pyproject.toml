[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noradsched"
version = "0.1.0"
description = "Time, coordinate, settings and schedule-file primitives for satellite pass schedules"
requires-python = ">=3.10"
dependencies = []
keywords = ["satellite", "norad", "tracking", "schedule", "azimuth", "elevation", "sidereal time"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noradsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
