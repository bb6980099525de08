[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobagen"
version = "0.0.1"
description = "A small game toolkit with 2D math, shapes, colours and a chess rules engine with a material heuristic and look-ahead search"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "chess", "vector math", "colors", "polygon", "move generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobagen"]

[tool.hatch.build.targets.sdist]
include = ["mobagen", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
