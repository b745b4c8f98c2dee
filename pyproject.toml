[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "warpshell"
version = "0.1.0"
description = "A small interactive Unix shell with warp, peek, seek, proclore and pastevents built-ins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "repl", "history", "unix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warpshell = "warpshell.shell:main"

[tool.setuptools.packages.find]
include = ["warpshell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
