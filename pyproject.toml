[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushrod"
version = "0.4.0"
description = "A small retained-mode widget toolkit with an event engine, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "widgets", "pygame", "toolkit", "user-interface"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pushrod"]

[tool.pytest.ini_options]
addopts = "-ra"
