[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libraryshelf"
version = "0.1.0"
description = "A small SQLite-backed book catalogue with an interactive menu for lending books"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalogue", "sqlite", "lending"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libraryshelf = "libraryshelf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libraryshelf"]

[tool.pytest.ini_options]
addopts = "-ra"
