[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonc"
version = "0.16.99"
description = "A JSON value model with reference-counted values, typed accessors, equality, deep copy and configurable serialization"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serialization", "json-object", "deep-copy"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
