[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stripcut"
version = "0.1.0"
description = "Strip packing of rectangular parts on a sheet of fixed width using first-fit decreasing height heuristics"
requires-python = ">=3.10"
dependencies = []
keywords = ["strip packing", "cutting stock", "ffdh", "nesting", "bin packing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Manufacturing",
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

[project.scripts]
stripcut = "stripcut.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stripcut"]

[tool.pytest.ini_options]
addopts = "-ra"
