[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinebook"
version = "1.0.0"
description = "Console cinema booking: movies, shows, hall seats, tickets, bills and revenue"
requires-python = ">=3.10"
dependencies = []
keywords = ["cinema", "booking", "tickets", "console", "scheduling"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cinebook = "cinebook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cinebook"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
