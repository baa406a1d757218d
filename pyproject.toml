[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slideview"
version = "0.1.0"
description = "Image viewer building blocks: EXIF summaries, Nikon maker notes, mouse navigation maths, button bindings and text styles"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["image", "viewer", "exif", "nikon", "makernote", "zoom", "pan", "mouse", "bindings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["slideview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
