[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms: binary search variants, string dynamic programming, graph traversals, spanning trees and word puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary-search",
    "dynamic-programming",
    "graphs",
    "fenwick-tree",
    "palindrome",
    "spanning-tree",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-common-substring = "algokit.substring:main"
algokit-graph = "algokit.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
