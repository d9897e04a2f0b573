[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calforge"
version = "0.16.15"
description = "iCalendar (RFC 5545) properties, content-line serialization and a parser for calendar documents."
requires-python = ">=3.10"
dependencies = []
keywords = ["ical", "icalendar", "parser", "RFC5545", "calendar", "ics"]
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
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calforge"]

[tool.hatch.build.targets.sdist]
include = ["calforge", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
