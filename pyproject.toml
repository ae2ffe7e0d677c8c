[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minimizers"
version = "2.2.0"
description = "Compute random and canonical minimizers of DNA sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["minimizers", "dna", "bioinformatics", "k-mer", "nthash", "super-k-mer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minimizers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
