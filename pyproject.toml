[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freightsched"
version = "0.1.0"
description = "Match freight refuel stops with cargo deliveries and keep the schedule in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["freight", "cargo", "scheduling", "logistics"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
freightsched = "freightsched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["freightsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
