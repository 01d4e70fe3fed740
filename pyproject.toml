[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "puzzlework"
version = "1.0.0"
description = "A calendar tiling puzzle solver, with a few small grid, graph and numeric puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "puzzle",
    "calendar puzzle",
    "polyomino",
    "tiling",
    "backtracking",
    "spiral",
    "connected components",
    "square root",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlework-calendar = "puzzlework.cli:main"
puzzlework-search = "puzzlework.search:main"
puzzlework-spiral = "puzzlework.spiral:main"
puzzlework-components = "puzzlework.components:main"
puzzlework-sqrt = "puzzlework.sqrt:main"

[tool.setuptools.packages.find]
include = ["puzzlework*"]

[tool.pytest.ini_options]
addopts = "-ra"
