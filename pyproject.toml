[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faststrings"
version = "0.1.0"
description = "C-style string, wide-string, tokenizing and error-message routines over Python bytes and lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "cstring", "strtok", "strerror", "wide-string", "libc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["faststrings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
