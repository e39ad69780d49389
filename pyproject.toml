[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genapprox"
version = "0.1.0"
description = "Approximate a polynomial with a step function evolved by a genetic algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["genetic algorithm", "evolutionary computation", "approximation", "polynomial", "step function"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genapprox = "genapprox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["genapprox"]

[tool.pytest.ini_options]
addopts = "-ra"
