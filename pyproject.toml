[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randbig"
version = "0.1.0"
description = "Uniform random sampling of arbitrarily large integers by bit size or range"
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "bigint", "integers", "sampling", "uniform"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["randbig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
