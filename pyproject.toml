[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asktty"
version = "0.1.0"
description = "Building blocks for terminal prompts: grapheme-aware line editing, parsing, formatting, validation, autocompletion and ANSI stripping."
requires-python = ">=3.10"
keywords = ["prompt", "cli", "terminal", "input", "confirm", "autocomplete", "ansi"]
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
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["asktty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
