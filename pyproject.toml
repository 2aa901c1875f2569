[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitos"
version = "0.1.0"
description = "GIF decoding and playback, in-memory files, UI layout, vector maths and listener helpers for small devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "gif", "layout", "quaternion", "in-memory-file"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["circuitos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
