[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolechess"
version = "0.1.0"
description = "Two-player chess in the terminal, with move validation, castling, en passant, promotion and end-of-game detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "game", "terminal", "board game", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolechess = "consolechess.game:main"

[tool.hatch.build.targets.wheel]
packages = ["consolechess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
