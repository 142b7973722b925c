[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toycc"
version = "0.1.0"
description = "A small compiler front end: a tokenizer for a C-like toy language and a Kaleidoscope lexer, parser and read-parse loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "kaleidoscope", "syntax-tree", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toycc = "toycc.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["toycc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
