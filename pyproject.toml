[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsnotice"
version = "0.1.0"
description = "Building blocks for file-system watchers: watch actions and error codes, a re-entrant mutex, Unicode code-unit conversion, mount and remote file-system detection, and platform queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "watcher", "unicode", "utf-8", "utf-16", "mount", "remote"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsnotice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
