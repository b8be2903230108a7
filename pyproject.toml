[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datasquare"
version = "0.1.0"
description = "Namespaces, blobs, info bytes, compact share counting and blob share commitment rules for data squares"
requires-python = ">=3.10"
dependencies = []
keywords = ["data availability", "namespace", "blob", "share", "merkle mountain range", "data square"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["datasquare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
