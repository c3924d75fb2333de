[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slimeguard"
version = "0.1.0"
description = "A lane-defence game: place elemental heroes on a lawn to stop waves of slimes."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower-defense", "lane-defense", "pygame", "slimes"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slimeguard = "slimeguard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["slimeguard"]

[tool.pytest.ini_options]
addopts = "-ra"
