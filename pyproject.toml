[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hivecmap"
version = "0.1.0"
description = "Web Mercator projection, shapefile path and quad code helpers for vector map tiling, with small web utilities"
requires-python = ">=3.10"
keywords = ["gis", "quadtree", "vector tiles", "web mercator", "mustache", "query string", "sha1"]
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
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hivecmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
