[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdlines"
version = "0.1.0"
description = "Small command-line toolkit: an HTML node tree, a terminal progress bar, an inline text editor and a tiny HTTP server"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "progress-bar", "terminal", "editor", "http-server", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
cmdlines-serve = "cmdlines.server:main"
cmdlines-edit = "cmdlines.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["cmdlines"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
