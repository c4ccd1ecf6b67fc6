[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoshell"
version = "0.1.0"
description = "An interactive to-do list shell with categories, completion status and due dates"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "shell", "cli", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todoshell = "todoshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todoshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
