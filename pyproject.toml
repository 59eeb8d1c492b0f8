[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchnet"
version = "0.1.0"
description = "A small fully connected neural network built from plain Python matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "matrix", "machine learning", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scratchnet = "scratchnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
