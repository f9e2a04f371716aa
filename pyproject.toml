[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logslice"
version = "0.1.0"
description = "Building blocks for slicing log lines by time range and pattern, with head, tail, sampling and deduplication."
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "log-analysis", "grep", "time-range", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logslice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
