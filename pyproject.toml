[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limavns"
version = "0.1.0"
description = "Basic variable neighborhood search heuristic for balanced minimum sum-of-squares clustering"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "clustering",
    "balanced clustering",
    "sum-of-squares",
    "variable neighborhood search",
    "heuristic",
    "optimization",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
limavns = "limavns.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["limavns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
