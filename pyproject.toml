[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storedux"
version = "0.1.0"
description = "Application-wide shared state: stores, reducers, subscribers, listeners, selectors and undo history."
requires-python = ">=3.10"
dependencies = []
keywords = ["state", "store", "reducer", "subscribe", "listener", "selector", "undo"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["storedux"]

[tool.pytest.ini_options]
addopts = "-ra"
