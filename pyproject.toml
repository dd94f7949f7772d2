[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "0.1.0"
description = "A small box of games: Truco against the computer, a maze chase, a lane-dodging taxi and a breadth-first search visualiser."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "games",
    "terminal",
    "curses",
    "truco",
    "cards",
    "maze",
    "breadth-first-search",
    "pygame",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadebox-truco = "arcadebox.truco_game:main"
arcadebox-pacman = "arcadebox.pacman_app:main"
arcadebox-taxi = "arcadebox.taxi:main"
arcadebox-bfs = "arcadebox.bfs_app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.hatch.build.targets.sdist]
include = [
    "arcadebox",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
