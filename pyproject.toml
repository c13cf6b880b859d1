[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubray"
version = "0.1.0"
description = "A small grid-map raycasting engine that reads .cub scene files and XPM textures"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "xpm", "bmp", "pygame", "first-person"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubray = "cubray.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
