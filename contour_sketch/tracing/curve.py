"""
Cubic Bezier curves anchored on a scan band.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

Point = Tuple[int, int]

@dataclass(frozen=True)
class Curve:
    """
    A cubic Bezier whose control points sit on a horizontal band.

    The end points lie on the band; the two interior points are pushed
    ``offset`` below and above it to give the stroke its bulge.
    """
    x0: int
    x1: int
    x2: int
    x3: int
    y: int
    offset: int

    @property
    def control_points(self) -> List[Point]:
        return [
            (self.x0, self.y),
            (self.x1, self.y + self.offset),
            (self.x2, self.y - self.offset),
            (self.x3, self.y),
        ]

    def polygon_length(self) -> float:
        """Length of the control polygon, an upper bound on the arc length."""
        points = np.asarray(self.control_points, dtype=np.float64)
        return float(np.linalg.norm(np.diff(points, axis=0), axis=1).sum())

    def sample(self, num_points: int) -> np.ndarray:
        """Sample points along the curve, returns a (num_points, 2) float array."""
        p0, p1, p2, p3 = np.asarray(self.control_points, dtype=np.float64)
        t = np.linspace(0.0, 1.0, num_points).reshape(-1, 1)
        return ((1 - t) ** 3) * p0 + 3 * ((1 - t) ** 2) * t * p1 + 3 * (1 - t) * (t ** 2) * p2 + (t ** 3) * p3
