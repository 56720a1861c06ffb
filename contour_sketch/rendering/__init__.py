"""
Rendering module for drawing curves onto a blank canvas.
"""

from .surface import OutputSurface

__all__ = ['OutputSurface']
