[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadnet"
version = "0.1.0"
description = "Road network planning on a city graph: minimum spanning tree, shortest routes, new-road suggestions, a tour of target cities and an interactive map view"
requires-python = ">=3.10"
keywords = ["graph", "kruskal", "dijkstra", "road network", "spanning tree", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roadnet = "roadnet.visualization:main"

[tool.hatch.build.targets.wheel]
packages = ["roadnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
