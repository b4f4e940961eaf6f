"""Tools for 8-bit grayscale BMP images, two text filters and a uniform cost search."""

__version__ = "1.0.0"