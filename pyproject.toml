[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parseqalgs"
version = "0.1.0"
description = "Sequence algorithms: merging, counting sort, hashing, union-find, suffix arrays and small text tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "merge", "counting sort", "suffix array", "hash table", "union find", "sequences"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
parseqalgs-wc = "parseqalgs.wc:main"
parseqalgs-mcss = "parseqalgs.mcss:main"
parseqalgs-primes = "parseqalgs.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["parseqalgs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
