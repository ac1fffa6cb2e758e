[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelmgr"
version = "0.1.0"
description = "A small hotel front-desk system on SQLite: rooms, check-in, check-out, extras and guest lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "reservations", "front desk", "check-in", "sqlite"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hotelmgr = "hotelmgr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hotelmgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
