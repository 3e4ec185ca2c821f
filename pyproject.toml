[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starfield"
version = "1.0.0"
description = "A drifting night-sky screen saver: twinkling stars, a ringed moon, a space ship, a tumbling astronaut, wish worms and a bouncing clock."
requires-python = ">=3.10"
keywords = ["screensaver", "starfield", "animation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Screen Savers",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
starfield = "starfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["starfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
