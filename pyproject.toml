[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strkit"
version = "0.1.0"
description = "C string.h style helpers, a printf-style formatter and errno messages for Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "memory", "sprintf", "strtok", "strerror", "formatting", "atoi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
