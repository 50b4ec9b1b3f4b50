[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdcat"
version = "0.1.0"
description = "Concatenate files to standard output with page- and block-aligned buffered copying"
requires-python = ">=3.10"
dependencies = []
keywords = ["cat", "concatenate", "files", "stdout", "buffer", "posix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdcat = "fdcat.cat:main"

[tool.hatch.build.targets.wheel]
packages = ["fdcat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
