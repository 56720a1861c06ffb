"""
Sampling module for measuring ink density in pixel grids.
"""

from .sampler import IntensitySampler, sample_inverted_intensity

__all__ = ['IntensitySampler', 'sample_inverted_intensity']
