[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gribchik"
version = "0.1.0"
description = "A small tile-based collect-and-escape puzzle game with a printf-style formatter and a chunked line reader"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "tiles", "pygame", "printf"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gribchik = "gribchik.display:main"

[tool.hatch.build.targets.wheel]
packages = ["gribchik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
