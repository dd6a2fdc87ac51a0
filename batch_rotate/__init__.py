"""Batch rotation of raster images by multiples of 90 degrees."""

__version__ = "0.1.0"
