[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threepointcircle"
version = "0.1.0"
description = "Draw the circle through three points on a grayscale raster canvas and save it as PGM"
requires-python = ">=3.10"
dependencies = []
keywords = ["circle", "circumcircle", "raster", "grayscale", "geometry", "pgm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threepointcircle = "threepointcircle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["threepointcircle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
