[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoplay"
version = "0.1.0"
description = "Classic algorithm exercises, small thread-coordination patterns and an in-memory partitioned Bloom filter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "linked-list",
    "dynamic-programming",
    "bloom-filter",
    "murmur3",
    "concurrency",
    "exercises",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["algoplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
