[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regextrie"
version = "0.1.0"
description = "Match one input string against many regular expressions using a trie of literal prefixes"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "trie", "matching", "patterns", "prefix"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
regextrie = "regextrie.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["regextrie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
