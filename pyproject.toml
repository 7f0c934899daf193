[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consumo"
version = "0.1.0"
description = "Household energy consumption tracker: rooms, appliances and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["energy", "consumption", "kwh", "household", "appliances"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consumo = "consumo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consumo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
