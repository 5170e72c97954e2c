[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "richmonopoly"
version = "0.1.0"
description = "Building blocks for a four-player property trading board game: players, land, hospital, dice, shop, events and horse racing"
requires-python = ">=3.10"
dependencies = []
keywords = ["monopoly", "board game", "game engine", "horse racing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["richmonopoly*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
