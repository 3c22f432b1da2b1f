[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digitlist"
version = "0.1.0"
description = "Numbers stored as sequences of digit cells, drawn as boxes and rearranged from an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["digits", "data structures", "teaching", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
digitlist = "digitlist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["digitlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
