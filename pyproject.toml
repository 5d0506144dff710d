[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edcurve"
version = "0.1.0"
description = "Pure-Python group operations on the Edwards form of Curve25519"
requires-python = ">=3.10"
dependencies = []
keywords = ["curve25519", "ed25519", "edwards", "elliptic-curve", "cryptography", "multiscalar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edcurve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
