[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynamis"
version = "0.1.0"
description = "Geometry, option parsing and solver bases for independent sets of dynamic rectangular labels"
requires-python = ">=3.10"
dependencies = []
keywords = ["independent set", "geometry", "rectangles", "labels", "grid"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynamis = "dynamis.config:main"

[tool.hatch.build.targets.wheel]
packages = ["dynamis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
