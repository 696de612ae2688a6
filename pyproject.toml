[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uscriptkit"
version = "1.0.0"
description = "Small utilities for scripting tools: logging, boolean expressions, flags, hex dumps, INI files, numeric and string parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexdump", "hexlify", "ini", "logging", "boolean-expression", "parsing", "strings"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uscriptkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
