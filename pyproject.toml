[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vkboiler"
version = "0.1.0"
description = "A small application framework: severity-filtered, colored debug output and an application lifecycle."
requires-python = ">=3.10"
dependencies = []
keywords = ["application", "framework", "debug", "logging", "boilerplate", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vkboiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
