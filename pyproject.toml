[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cleanusers"
version = "0.1.0"
description = "A small layered HTTP service for managing users: Flask handlers, a service layer and an SQLite repository."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["http", "rest", "users", "crud", "flask", "sqlite", "clean-architecture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cleanusers = "cleanusers.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cleanusers"]

[tool.pytest.ini_options]
addopts = "-ra"
