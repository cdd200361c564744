[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skimmer"
version = "0.1.0"
description = "Building blocks for an interactive fuzzy finder: query line editing, colour themes, option records, layout and preview parsing, status line and command text helpers"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["fuzzy", "finder", "selector", "terminal", "query", "theme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["skimmer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
