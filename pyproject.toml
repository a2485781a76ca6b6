[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treedist"
version = "0.1.0"
description = "Tree edit distance with the Selkow and Zhang-Shasha algorithms, plus benchmark runners"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tree edit distance",
    "selkow",
    "zhang-shasha",
    "dynamic programming",
    "levenshtein",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treedist-selkow-bench = "treedist.selkow_bench:main"
treedist-zs-bench = "treedist.zs_bench:main"

[tool.hatch.build.targets.wheel]
packages = ["treedist"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
