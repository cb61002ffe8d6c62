[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heliresgate"
version = "0.1.0"
description = "Terminal helicopter rescue game: fly soldiers to safety while rocket batteries take turns reloading."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "ascii", "threads", "concurrency", "helicopter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heliresgate = "heliresgate.main:main"

[tool.hatch.build.targets.wheel]
packages = ["heliresgate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
