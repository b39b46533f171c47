[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankboard"
version = "0.1.0"
description = "A score leaderboard backed by a self-checking red-black tree, with an interactive command-line prompt."
requires-python = ">=3.10"
dependencies = []
keywords = ["leaderboard", "ranking", "red-black tree", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rankboard = "rankboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rankboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
