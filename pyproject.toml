[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cseskit"
version = "0.1.0"
description = "Solvers for classic algorithmic problems: towers, apartments, permutations, playlist and repetitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "lis", "two-pointers", "sliding-window", "sieve"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cses-towers = "cseskit.towers:main"
cses-apartments = "cseskit.apartments:main"
cses-permutations = "cseskit.permutations:main"
cses-playlist = "cseskit.playlist:main"
cses-repetitions = "cseskit.repetitions:main"

[tool.hatch.build.targets.wheel]
packages = ["cseskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
