[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geokit"
version = "0.1.0"
description = "Geodetic coordinate operations: map projections, Helmert transformations and series helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["geodesy", "projection", "helmert", "mercator", "lambert", "coordinates", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["geokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
