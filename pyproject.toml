[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcroutersync"
version = "0.1.0"
description = "Keep mc-router routes in sync with a server list API"
requires-python = ">=3.10"
keywords = ["minecraft", "mc-router", "reconciler", "routing", "sync"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
mc-router-sync = "mcroutersync.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcroutersync"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
