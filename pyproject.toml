[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "propensity"
version = "0.1.0"
description = "Propensity scores from a logistic regression fitted with L-BFGS"
requires-python = ">=3.10"
keywords = ["propensity score", "logistic regression", "logit", "l-bfgs", "classification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
propensity = "propensity.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["propensity"]

[tool.pytest.ini_options]
addopts = "-ra"
