[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aisearch"
version = "0.1.0"
description = "Classic AI search algorithms: A* and iterative deepening for the 8-puzzle, CSP graph colouring and a genetic N-queens solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "search", "a-star", "8-puzzle", "iterative-deepening", "csp", "graph-coloring", "genetic-algorithm", "n-queens"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aisearch-astar = "aisearch.astar:main"
aisearch-ids = "aisearch.ids:main"
aisearch-coloring = "aisearch.coloring:main"
aisearch-nqueen = "aisearch.nqueen:main"

[tool.hatch.build.targets.wheel]
packages = ["aisearch"]

[tool.pytest.ini_options]
addopts = "-ra"
