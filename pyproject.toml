[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adocspan"
version = "0.1.0"
description = "Position-aware spans and inline parsing primitives for AsciiDoc source text"
requires-python = ">=3.10"
dependencies = []
keywords = ["asciidoc", "parser", "span", "markup", "inline"]
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
    "Topic :: Text Processing :: Markup",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adocspan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
