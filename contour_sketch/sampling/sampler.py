"""
Inverted greyscale intensity sampling over vertical windows.
"""

import numpy as np

def inverted_greyscale(grid: np.ndarray) -> np.ndarray:
    """
    Compute ``255 - mean(channels)`` for every pixel.

    The channel mean is truncated to an integer before inversion.

    Args:
        grid: uint8 array of shape (height, width, channels)

    Returns:
        int64 array of shape (height, width) with values in [0, 255]
    """
    channels = grid.shape[2]
    grey = grid.sum(axis=2, dtype=np.int64) // channels
    return 255 - grey

def _row_range(y: int, half_window: int, height: int):
    """Clamp the window rows [y - half_window, y + half_window) to the grid."""
    top = max(y - half_window, 0)
    bottom = min(y + half_window, height)
    return top, max(bottom, top)

def sample_inverted_intensity(grid: np.ndarray, x: int, y: int, half_window: int) -> int:
    """
    Sum inverted greyscale values over a vertical slice of the grid.

    Rows ``y + i`` for ``i`` in ``[-half_window, half_window)`` are visited
    at column ``x``. Rows outside the grid contribute nothing.

    Args:
        grid: uint8 array of shape (height, width, channels)
        x: Column to sample, must lie inside the grid
        y: Vertical center of the window
        half_window: Window radius in rows

    Returns:
        Non-negative integer sum
    """
    return IntensitySampler(grid[:, x:x + 1], half_window).sample(0, y)

class IntensitySampler:
    """
    Samples inverted intensity from one pixel grid.

    The inverted greyscale plane is computed once so that whole bands can
    be sampled with a single vectorised sum.
    """

    def __init__(self, grid: np.ndarray, half_window: int):
        self.half_window = half_window
        self.height, self.width = grid.shape[:2]
        self._ink = inverted_greyscale(grid)

    def sample(self, x: int, y: int) -> int:
        """Inverted intensity sum of the window centred on row ``y`` at column ``x``."""
        top, bottom = _row_range(y, self.half_window, self.height)
        return int(self._ink[top:bottom, x].sum())

    def sample_band(self, y: int) -> np.ndarray:
        """Inverted intensity sums for every column of the band at row ``y``."""
        top, bottom = _row_range(y, self.half_window, self.height)
        return self._ink[top:bottom].sum(axis=0)
