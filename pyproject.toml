[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms: sorting, string matching, convex hulls, backtracking, dynamic programming, graphs and flows"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "rabin-karp",
    "convex-hull",
    "15-puzzle",
    "n-queens",
    "strassen",
    "matrix-chain",
    "knapsack",
    "vertex-cover",
    "shortest-path",
    "minimum-spanning-tree",
    "max-flow",
]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-sorting = "algolab.sorting:main"
algolab-growth = "algolab.growth:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
