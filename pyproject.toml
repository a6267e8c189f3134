[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small programming exercises: a card deck, interfaces, streams, a password vault, searching, sorting, recursion and array puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "sorting", "binary-search", "recursion", "learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
katas-deck = "katas.deck:main"
katas-greetings = "katas.greetings:main"
katas-basics = "katas.basics:main"
katas-streams = "katas.streams:main"
katas-vault = "katas.vault:main"

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
addopts = "-ra"
