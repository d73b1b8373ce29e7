[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "figuredraw"
version = "0.1.0"
description = "A small diagram editor: draw rectangles, ellipses and triangles, connect them with lines, and save drawings as JSON."
requires-python = ">=3.10"
dependencies = []
keywords = ["diagram", "drawing", "shapes", "editor", "tkinter", "json"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
figuredraw = "figuredraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["figuredraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
