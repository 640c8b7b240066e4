[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftls"
version = "0.1.0"
description = "Option parsing, permission strings and small text helpers for an ls-style directory lister"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "permissions", "mode", "options", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
