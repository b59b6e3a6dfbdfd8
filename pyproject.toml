[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "othello"
version = "0.1.0"
description = "Console Othello (Reversi) for two players, human or computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["othello", "reversi", "board game", "console game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
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
othello = "othello.game:main"

[tool.hatch.build.targets.wheel]
packages = ["othello"]

[tool.pytest.ini_options]
addopts = "-ra"
