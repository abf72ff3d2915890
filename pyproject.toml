[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexarch"
version = "0.1.0"
description = "Hexagonal-architecture services for membership, wallet balances and payments"
requires-python = ">=3.10"
keywords = ["hexagonal", "ports-and-adapters", "wallet", "payment", "membership"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hexarch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
