[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saiyan-menu"
version = "0.1.0"
description = "A martial-arts themed game menu with three level stages, built on pygame."
requires-python = ">=3.10"
keywords = ["game", "pygame", "menu", "levels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
saiyan-menu = "saiyan_menu.app:main"

[tool.hatch.build.targets.wheel]
packages = ["saiyan_menu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
