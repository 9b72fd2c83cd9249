[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonoutliner"
version = "0.1.0"
description = "A small JSON-like tokenizer and parser with support for bare references"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "lexer", "parser", "tokenizer", "references"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonoutliner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
