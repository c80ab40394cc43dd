[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "minishell"
version = "0.1.0"
description = "Lexer, syntax checks and command helpers for a small shell, with the character, string, memory and list helpers it relies on"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "syntax", "command line"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["minishell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
