[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sailhub"
version = "0.1.2"
description = "GitHub GraphQL building blocks: enum mappings, value types, query texts, a git tree model and client settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["github", "graphql", "api", "query", "settings"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sailhub"]

[tool.pytest.ini_options]
addopts = "-ra"
