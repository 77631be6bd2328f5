[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicum"
version = "1.0.0"
description = "Small algorithms and data structures: graphs, geometry, stacks, hash maps, ratios, primes and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "dijkstra",
    "connected-components",
    "binary-search",
    "binary-tree",
    "hash-map",
    "rational-numbers",
    "prime-numbers",
    "geometry",
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
practicum-primes = "practicum.primes_app:main"
practicum-ratio = "practicum.ratio_app:main"
practicum-tree = "practicum.tree_app:main"

[tool.hatch.build.targets.wheel]
packages = ["practicum"]

[tool.hatch.build.targets.sdist]
include = ["practicum", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
