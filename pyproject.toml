[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "standardcodes"
version = "0.1.0"
description = "Classic sorting and searching algorithms with a timestamped trace of every step"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "education", "bfs", "dfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
standardcodes = "standardcodes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["standardcodes"]

[tool.pytest.ini_options]
addopts = "-ra"
