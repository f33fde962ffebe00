[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hammingpix"
version = "0.1.0"
description = "Encode short text messages as Hamming-coded grids of coloured cells in PNG images and read them back"
requires-python = ">=3.10"
keywords = ["hamming", "image", "barcode", "encoding", "png"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hammingpix = "hammingpix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hammingpix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
