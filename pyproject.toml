[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "improvedlib"
version = "0.1.0"
description = "Small utility library: character, string and byte-buffer helpers, a linked list, printf-style output and a buffered line reader."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "linked-list", "printf", "line-reader", "utilities"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["improvedlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
