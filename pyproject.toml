[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duds"
version = "0.1.0"
description = "A small tile-based dungeon game with A* pathfinding, tile sheet slicing and a tiny entity-component world."
requires-python = ">=3.10"
keywords = ["game", "dungeon", "pathfinding", "a-star", "tilemap", "ecs", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
duds = "duds.app:main"

[tool.hatch.build.targets.wheel]
packages = ["duds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
