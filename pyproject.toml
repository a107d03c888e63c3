[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "debugfire"
version = "0.1.0"
description = "Teaching warm-ups: a call-stack story, a stack-overflow hunt and a cellular fire simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "debugging", "simulation", "fire", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
debugfire = "debugfire.app:main"

[tool.setuptools.packages.find]
include = ["debugfire*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
