[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenaquest"
version = "0.1.0"
description = "A small text role-playing battle engine with heroes, bosses, minions and enemies"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "battle", "text-adventure", "observer"]
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
testpaths = ["tests"]
addopts = "-ra"
