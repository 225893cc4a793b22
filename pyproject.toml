[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbccoder"
version = "2.9.0"
description = "Parse CAN DBC matrices and generate C frame-monitor header and source files"
requires-python = ">=3.10"
dependencies = []
keywords = ["can", "dbc", "code-generation", "automotive", "embedded", "c"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dbccoder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
