[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastatools"
version = "0.1.0"
description = "Read FASTA from standard input and write DNA, RNA or reverse-complement sequences, plus a small test-tree lister"
requires-python = ">=3.10"
keywords = ["fasta", "dna", "rna", "reverse complement", "bioinformatics"]
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fastatools = "fastatools.cli:main"
projtester = "fastatools.projtester:main"

[tool.hatch.build.targets.wheel]
packages = ["fastatools"]

[tool.pytest.ini_options]
addopts = "-ra"
