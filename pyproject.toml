[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamletsim"
version = "0.1.0"
description = "A small day-by-day settlement simulation with buildings, shared resources and observers."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "settlement", "resources", "observer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hamletsim = "hamletsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hamletsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
