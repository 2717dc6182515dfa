[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubes"
version = "0.1.0"
description = "Four in a row on a 4x4x4 board, played in the terminal against a minimax opponent"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "connect-four", "3d", "minimax", "alpha-beta", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubes = "cubes.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["cubes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
