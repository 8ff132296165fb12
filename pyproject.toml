[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawlkit"
version = "0.1.0"
description = "Building blocks for a concurrent web crawler: buffer pools, a re-readable reader, crawler errors, scheduler arguments, domain helpers, structured logging and Go package inspection tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "crawler",
    "buffer",
    "pool",
    "logging",
    "dependency-graph",
    "directory-tree",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crawlkit-showds = "crawlkit.showds:main"
crawlkit-showpds = "crawlkit.showpds:main"

[tool.hatch.build.targets.wheel]
packages = ["crawlkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
