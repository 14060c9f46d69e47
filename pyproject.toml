[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphmaze"
version = "0.1.0"
description = "Directed graphs with lettered, course and grid vertices, a maze reader, solver and ASCII renderer, and a few plain containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "maze", "breadth-first search", "shortest path", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphmaze = "graphmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
