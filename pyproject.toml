[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexpath"
version = "0.1.0"
description = "Lexical POSIX path decomposition, normalization, portability checks and unique names"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "filesystem", "lexical", "normalize", "portability"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lexpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
