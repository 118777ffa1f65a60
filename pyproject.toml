[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halfblock"
version = "0.1.0"
description = "Draw true-colour pixels in a terminal using half-block characters"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "graphics", "ansi", "truecolor", "half-block", "pixels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
halfblock-demo = "halfblock.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["halfblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
