[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacewar"
version = "0.1.0"
description = "A two-player local space duel: rotate, thrust and shoot until one ship explodes."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "spacewar", "two-player", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spacewar = "spacewar.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spacewar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
