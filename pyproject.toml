[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "console-mario"
version = "0.1.0"
description = "A small side-scrolling platformer played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "terminal", "curses", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
console-mario = "console_mario.app:main"

[tool.hatch.build.targets.wheel]
packages = ["console_mario"]

[tool.pytest.ini_options]
addopts = "-ra"
