[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickengine"
version = "0.1.0"
description = "Entity components, rectangle collision detection, game state switching and JSON access for 2D games"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "ecs", "collision", "2d", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brickengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
