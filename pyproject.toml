[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "armybattle"
version = "1.0.0"
description = "A console battle simulation between two randomly generated armies of elves and demons."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "battle", "console", "creatures"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
armybattle = "armybattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["armybattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
