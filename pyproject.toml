[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matglyph"
version = "0.1.0"
description = "A small widget toolkit core with a built-in bitmap font, a draw-command renderer and an event loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "bitmap font", "rendering", "event loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Text Processing :: Fonts",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matglyph = "matglyph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matglyph"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
