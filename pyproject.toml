[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fincli"
version = "0.1.0"
description = "Finance calculators on the command line: mortgages, home purchases, FIRE numbers and portfolio rebalancing."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "mortgage", "amortization", "fire", "rebalance", "real-estate", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fin = "fincli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fincli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
