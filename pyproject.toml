[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strkit"
version = "0.1.0"
description = "String algorithms (suffix arrays, suffix automata, palindromic trees, KMP, tries) and number-theory helpers"
requires-python = ">=3.10"
keywords = [
    "suffix array",
    "suffix automaton",
    "palindromic tree",
    "eertree",
    "kmp",
    "trie",
    "manacher",
    "mobius",
    "lucas",
    "number theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["strkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
