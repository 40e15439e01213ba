[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cruntime"
version = "0.1.0"
description = "A small C runtime in Python: ctype, string and memory routines, sqrt, numeric conversion, integer arithmetic, signals and process exit."
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "ctype", "strtoul", "strtod", "signals", "runtime"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cruntime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
