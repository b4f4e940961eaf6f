[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grayworks"
version = "1.0.0"
description = "Small tools for 8-bit grayscale BMP images, plus a few text and search utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bmp",
    "grayscale",
    "image-processing",
    "steganography",
    "emboss",
    "text-formatting",
    "tex",
    "uniform-cost-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grayworks-bmpcopy = "grayworks.bmpimage:main"
grayworks-crop = "grayworks.crop:main"
grayworks-stega = "grayworks.stega:main"
grayworks-showi = "grayworks.viewer:main"
grayworks-emboss = "grayworks.emboss:main"
grayworks-texc = "grayworks.texc:main"
grayworks-para = "grayworks.para:main"
grayworks-ucs = "grayworks.search:main"

[tool.hatch.build.targets.wheel]
packages = ["grayworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
