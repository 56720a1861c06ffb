"""
Contour Sketch - turns raster images into hand-drawn style curve sketches.
"""

from .converter import ImageConverter

__version__ = "0.1.0"

__all__ = ['ImageConverter']
