[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kataster"
version = "0.0.1"
description = "A small asteroids-style arcade shooter with a wrap-around arena, splitting asteroids and menus."
requires-python = ">=3.10"
keywords = ["game", "arcade", "asteroids", "shooter", "pygame"]
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
kataster = "kataster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["kataster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
