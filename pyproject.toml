[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediashelf"
version = "0.1.0"
description = "Keep a catalogue of movies, books and songs and produce reports from a command file"
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "library", "catalogue", "movies", "books", "songs", "reports"]
classifiers = [
    "Development Status :: 4 - Beta",
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
mediashelf = "mediashelf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mediashelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
