[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sekentop"
version = "0.1.0"
description = "A small bouncing-ball paddle game: keep the ball in the air and count the bounces."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "paddle", "ball", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sekentop = "sekentop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sekentop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
