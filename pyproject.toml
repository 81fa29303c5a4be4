[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toyapps"
version = "0.1.0"
description = "Small toy models: 2D vectors, flock settings, a to-do list, nested-list hovering and a keyed list of random people"
requires-python = ">=3.10"
dependencies = []
keywords = ["boids", "vector", "simulation", "todo", "keyed-list", "toys"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toyapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
