"""
Drawing surface the sketch is composed on.
"""

import math
from typing import Iterable, Tuple

import cv2
import numpy as np
from PIL import Image

from contour_sketch.tracing import Curve

MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}

class OutputSurface:
    """
    A white canvas that black curve strokes are drawn onto.

    Pixels are stored in the same channel layout as the source image. An
    alpha channel, if any, stays fully opaque.
    """

    def __init__(self, pixels: np.ndarray, stroke_width: int = 1):
        if pixels.ndim != 3 or pixels.shape[2] not in MODES:
            raise ValueError(f"Unsupported surface shape: {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
        self.stroke_width = stroke_width

    @classmethod
    def blank(cls, width: int, height: int, channels: int, stroke_width: int = 1) -> "OutputSurface":
        """Create an all-white surface."""
        return cls(np.full((height, width, channels), 255, dtype=np.uint8), stroke_width)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def channels(self) -> int:
        return self.pixels.shape[2]

    @property
    def ink(self) -> Tuple[int, ...]:
        """Stroke colour: black, opaque when the surface has alpha."""
        if self.channels in (2, 4):
            return (0,) * (self.channels - 1) + (255,)
        return (0,) * self.channels

    def draw_curve(self, curve: Curve) -> None:
        """Flatten a curve to a polyline and stroke it."""
        num_points = max(2, math.ceil(curve.polygon_length()) + 1)
        points = np.rint(curve.sample(num_points)).astype(np.int32)
        cv2.polylines(
            self.pixels,
            [points.reshape(-1, 1, 2)],
            isClosed=False,
            color=self.ink,
            thickness=self.stroke_width,
            lineType=cv2.LINE_8,
        )

    def draw_curves(self, curves: Iterable[Curve]) -> None:
        for curve in curves:
            self.draw_curve(curve)

    def is_blank(self) -> bool:
        return bool((self.pixels == 255).all())

    def to_image(self) -> Image.Image:
        """Wrap the pixels in a Pillow image for encoding."""
        pixels = self.pixels[:, :, 0] if self.channels == 1 else self.pixels
        return Image.fromarray(pixels)
