"""
Curve tracing along horizontal scan bands.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from contour_sketch.sampling import IntensitySampler
from contour_sketch.tracing.curve import Curve

def band_positions(height: int, offset: int) -> Iterator[int]:
    """
    Yield the row of every scan band.

    The first band sits at ``offset // 2``, the following ones are spaced
    ``3 * offset // 4`` apart until the image height is reached.
    """
    spacing = 3 * offset // 4
    if spacing < 1:
        raise ValueError(f"Offset {offset} gives no band spacing")

    y = offset // 2
    while y < height:
        yield y
        y += spacing

class ControlPointWindow:
    """
    Fixed four-slot ring buffer of control point x coordinates.

    Once full, ``slide`` drops the three oldest points and keeps the newest
    as the start of the next curve.
    """

    SIZE = 4

    def __init__(self, seed: int = 0):
        self._slots = [0] * self.SIZE
        self._head = 0
        self._size = 0
        self.push(seed)

    def __len__(self) -> int:
        return self._size

    def is_full(self) -> bool:
        return self._size == self.SIZE

    def push(self, x: int) -> None:
        if self.is_full():
            raise IndexError("Control point window is full")
        self._slots[(self._head + self._size) % self.SIZE] = x
        self._size += 1

    def points(self) -> Tuple[int, ...]:
        """Points from oldest to newest."""
        return tuple(self._slots[(self._head + i) % self.SIZE] for i in range(self._size))

    def slide(self) -> None:
        """Drop every point but the newest."""
        self._head = (self._head + self._size - 1) % self.SIZE
        self._size = 1

@dataclass
class BandTrace:
    """Outcome of tracing a single band."""
    y: int
    control_points: List[int] = field(default_factory=list)
    curves: List[Curve] = field(default_factory=list)

class CurveTracer:
    """
    Finds threshold crossings of accumulated ink along bands and turns
    every four consecutive control points into a cubic curve.
    """

    def __init__(self, offset: int, threshold: int):
        """
        Initialize the tracer.

        Args:
            offset: Sampling window height and curve bulge in pixels
            threshold: Accumulated ink required for a control point
        """
        self.offset = offset
        self.threshold = threshold
        self.logger = logging.getLogger(__name__)

    @property
    def half_window(self) -> int:
        return self.offset // 2

    def trace_band(self, sampler: IntensitySampler, y: int) -> BandTrace:
        """
        Trace one band.

        Args:
            sampler: Sampler over the image being converted
            y: Row of the band

        Returns:
            BandTrace with the crossings and curves in left-to-right order
        """
        trace = BandTrace(y=y)
        window = ControlPointWindow(seed=0)
        accumulator = 0

        for x, ink in enumerate(sampler.sample_band(y).tolist()):
            accumulator += ink
            if accumulator > self.threshold:
                window.push(x)
                trace.control_points.append(x)
                accumulator = 0

            if window.is_full():
                x0, x1, x2, x3 = window.points()
                trace.curves.append(Curve(x0, x1, x2, x3, y=y, offset=self.offset))
                window.slide()

        # A trailing window with fewer than four points draws nothing
        self.logger.debug(
            f"Band y={y}: {len(trace.control_points)} control points, {len(trace.curves)} curves"
        )
        return trace

    def trace(self, grid: np.ndarray) -> List[BandTrace]:
        """Trace every band of a pixel grid, top to bottom."""
        sampler = IntensitySampler(grid, self.half_window)
        return [self.trace_band(sampler, y) for y in band_positions(sampler.height, self.offset)]
