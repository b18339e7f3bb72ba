[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starfield"
version = "0.1.0"
description = "Star catalogue processing, sky geometry and camera logic for an interactive star map"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "stars", "constellations", "hyg", "galactic", "equatorial", "sky"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["starfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
