[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubscene"
version = "0.1.0"
description = "Reader for the header of .cub scene files: wall texture paths and floor and ceiling colours"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub3d", "raycasting", "scene", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubscene = "cubscene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
