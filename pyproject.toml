[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacegame"
version = "0.1.0"
description = "A small vector-graphics spaceship game built on a node and component scene graph"
requires-python = ">=3.10"
keywords = ["game", "arcade", "scene-graph", "vector-graphics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
spacegame = "spacegame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spacegame"]

[tool.pytest.ini_options]
addopts = "-ra"
