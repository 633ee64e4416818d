[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linepad"
version = "0.1.0"
description = "A small line-oriented text editor with clipboard, cursor and undo/redo history"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "undo", "redo", "clipboard", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linepad = "linepad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linepad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
