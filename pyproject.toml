[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgengine"
version = "0.1.0"
description = "Deterministic fixed-point simulation core for real-time strategy games"
requires-python = ">=3.10"
keywords = [
    "rts",
    "simulation",
    "fixed-point",
    "pathfinding",
    "a-star",
    "replay",
    "ecs",
    "deterministic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
