[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenaquest"
version = "0.1.0"
description = "A small text-mode role-playing game with turn-based battles, a timed boss duel, a market and save slots, driven by JSON data files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "console", "turn-based"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arenaquest = "arenaquest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arenaquest"]

[tool.pytest.ini_options]
addopts = "-ra"
