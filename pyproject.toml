[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfkit"
version = "0.1.0"
description = "Height-map grids, XPM image parsing, named colours and in-memory pixel images for wireframe viewers"
requires-python = ">=3.10"
dependencies = []
keywords = ["fdf", "wireframe", "heightmap", "xpm", "pixels", "colors"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
