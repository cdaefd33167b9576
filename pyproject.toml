[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashbench"
version = "0.1.0"
description = "Integer hash tables with open addressing, cuckoo hashing and AVL-tree buckets, plus a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "cuckoo hashing", "open addressing", "avl tree", "benchmark"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashbench = "hashbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["hashbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
