[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antsim"
version = "1.0.0"
description = "Ant colony simulation model: grid world with pheromone markers, foraging ants, colonies and an editor layout toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["ants", "simulation", "artificial life", "pheromones", "swarm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["antsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
