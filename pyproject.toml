[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sc2kit"
version = "0.1.0"
description = "Game launching, replay discovery and map analysis helpers for StarCraft II bots"
requires-python = ">=3.10"
dependencies = []
keywords = ["starcraft", "sc2", "bot", "rts", "map-analysis", "clustering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sc2kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
