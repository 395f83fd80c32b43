[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vexengine"
version = "0.1.0"
description = "A small layered 2D rendering engine with an orthographic camera, buffers, textures and an event system"
requires-python = ">=3.10"
keywords = ["engine", "rendering", "opengl", "2d", "game", "layers", "events", "camera"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vexengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
