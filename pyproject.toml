[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Small operating-systems exercises: a toy shell, threaded matrix multiplication and a train-boarding synchronisation monitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "threads", "synchronization", "matrix", "monitor", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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
oslabs-shell = "oslabs.shell:main"
oslabs-matrix = "oslabs.matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
