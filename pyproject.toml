[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proximity"
version = "0.1.0"
description = "Points, clusters, k-means++ seeding, report formatting and Fréchet distances and simplification of polygonal curves."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "frechet-distance",
    "curve-simplification",
    "k-means",
    "k-means++",
    "clustering",
    "nearest-neighbour",
    "curves",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["proximity"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
