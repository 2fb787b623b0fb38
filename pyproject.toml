[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "selene"
version = "0.1.0"
description = "Game model, messages and user storage for a multiplayer word-tile puzzle game"
requires-python = ">=3.10"
keywords = ["game", "word game", "tiles", "board", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "bcrypt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["selene"]

[tool.pytest.ini_options]
addopts = "-ra"
