[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dendritic"
version = "1.1.1"
description = "Decision trees, random forests, iterative linear solvers and linear regression on NumPy arrays"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "machine-learning",
    "decision-tree",
    "random-forest",
    "bootstrap",
    "gauss-seidel",
    "sor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dendritic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
