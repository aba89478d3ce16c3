[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classbooking"
version = "0.1.0"
description = "A small in-memory HTTP service for creating fitness classes and booking members into them"
requires-python = ">=3.10"
keywords = ["booking", "classes", "http", "flask", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask",
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
classbooking = "classbooking.server:main"

[tool.hatch.build.targets.wheel]
packages = ["classbooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
