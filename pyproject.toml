[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "clings"
version = "0.1.0"
description = "Runner for small graded C exercises: compiles each problem, waits for completion markers and offers hints"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "c", "learning", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clings = "clings.runner:main"

[tool.setuptools.packages.find]
include = ["clings*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
