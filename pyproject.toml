[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calmcore"
version = "0.1.0"
description = "Display-independent core of a calm window manager: menu search, screen geometry, EWMH state and command helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "ewmh", "menu", "search", "x11"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calmcore"]

[tool.hatch.build.targets.sdist]
include = ["calmcore", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
