[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trucogame"
version = "0.1.0"
description = "pygame screens for a Truco card game: resolution picker, intro, title, name entry, character and opponent choice, pause and options menus."
requires-python = ">=3.10"
keywords = ["truco", "card game", "pygame", "game", "menus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["trucogame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
