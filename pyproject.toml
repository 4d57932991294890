[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgbsplit"
version = "0.1.0"
description = "Split 24-bit BMP and colour PNM images into channels, convert to grayscale or black and white, blend images and compute histograms."
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "pnm", "ppm", "pgm", "image", "rgb", "grayscale", "histogram", "blend"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rgbsplit = "rgbsplit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rgbsplit"]

[tool.pytest.ini_options]
addopts = "-ra"
