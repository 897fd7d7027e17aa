[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hakjdb"
version = "1.2.0"
description = "In-memory key-value database core: named databases holding String and HashMap keys, with validation, logging and host helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "key-value", "in-memory", "hashmap", "storage"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hakjdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
