[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "featsel"
version = "0.1.0"
description = "Greedy forward selection and backward elimination of features, scored by leave-one-out nearest-neighbour accuracy"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "feature selection",
    "nearest neighbour",
    "leave-one-out",
    "cross-validation",
    "machine learning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
featsel = "featsel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["featsel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
