[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostescape"
version = "0.1.0"
description = "A top-down arcade survival game: dodge waves of ghosts and strike them down with thunder."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "survival", "ghosts"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ghostescape = "ghostescape.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ghostescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
