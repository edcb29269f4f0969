[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Small operating-systems exercises: employee record files and salary reports, threaded array statistics, and marker threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["threads", "processes", "synchronization", "binary-files", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
oslabs-creator = "oslabs.creator:main"
oslabs-reporter = "oslabs.reporter:main"
oslabs-launcher = "oslabs.launcher:main"
oslabs-minmax = "oslabs.minmax:main"
oslabs-marker = "oslabs.marker:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
