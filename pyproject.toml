[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imagex"
version = "0.1.0"
description = "A small raster image editor with colour filters, blur, brightness, contrast and undo/redo"
requires-python = ">=3.10"
keywords = ["image", "editor", "filters", "sepia", "grayscale", "blur", "undo", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imagex = "imagex.app:main"

[tool.hatch.build.targets.wheel]
packages = ["imagex"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
