[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "solong"
version = "0.1.0"
description = "A small tile-based puzzle game with .ber map validation, a text-mode player, X11 colour names and an XPM image reader."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "tiles", "xpm", "map", "x11-colors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
solong = "solong.game:main"

[tool.setuptools.packages.find]
include = ["solong*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
