[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashring"
version = "0.1.0"
description = "Consistent hash ring with virtual nodes for distributing keys across nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashring", "consistent-hashing", "distributed", "sharding", "virtual-nodes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashring"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
