[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgekit"
version = "0.1.0"
description = "Solutions to classic online-judge problems as a library of small algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "online-judge",
    "union-find",
    "sorting",
    "inversions",
    "primes",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["judgekit"]

[tool.hatch.build.targets.sdist]
include = ["judgekit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
