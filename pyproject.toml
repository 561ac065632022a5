[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsdcompat"
version = "0.1.0"
description = "BSD utility functions and data structures: number parsing, format checking, line parsing, ChaCha-based random numbers, bit strings, linked lists and trees"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "bsd",
    "arc4random",
    "chacha20",
    "fparseln",
    "fmtcheck",
    "getbsize",
    "bitstring",
    "linked list",
    "red-black tree",
    "splay tree",
    "queue",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bsdcompat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
