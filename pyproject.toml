[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpgray"
version = "0.1.0"
description = "Convert 24-bit BMP images to grayscale"
requires-python = ">=3.10"
keywords = ["bmp", "bitmap", "grayscale", "image", "conversion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpgray = "bmpgray.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpgray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
