[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "upwords"
version = "0.1.0"
description = "Stacked-tile word game engine: load boards, place and check words, undo moves and save boards."
requires-python = ">=3.10"
dependencies = []
keywords = ["upwords", "word game", "board game", "tiles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
upwords = "upwords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["upwords"]

[tool.pytest.ini_options]
addopts = "-ra"
