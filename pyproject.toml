[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixeduint"
version = "1.14.0"
description = "Unsigned integers with a fixed bit length: wrapping, checked, saturating and modular arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["uint", "unsigned", "integer", "bignum", "modular arithmetic", "montgomery"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fixeduint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
