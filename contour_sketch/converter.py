"""
Conversion of raster images into curve sketches.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from contour_sketch.rendering import OutputSurface
from contour_sketch.tracing import BandTrace, CurveTracer
from contour_sketch.tracing.tracer import band_positions
from contour_sketch.utils.image import check_format, decode_image, encode_image, load_pixel_grid, resolve_format

OFFSET_DEFAULT = 30
THRESHOLD_DEFAULT = 8000

__all__ = ['ImageConverter', 'band_positions', 'OFFSET_DEFAULT', 'THRESHOLD_DEFAULT']

class ImageConverter:
    """
    Converts images into black-on-white sketches made of cubic curves.
    """

    def __init__(
        self,
        offset: int = OFFSET_DEFAULT,
        threshold: int = THRESHOLD_DEFAULT,
        stroke_width: int = 1,
        output_format: Optional[str] = "JPEG",
        quality: int = 75,
    ):
        """
        Initialize the converter.

        Args:
            offset: Band spacing, sampling window height and curve bulge
            threshold: Accumulated ink needed for a new control point
            stroke_width: Line thickness of the curves in pixels
            output_format: Pillow format name, or None to infer it from
                the output file extension
            quality: Encoder quality for lossy formats
        """
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 2:
            raise ValueError(f"Offset must be an integer >= 2, got {offset!r}")
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ValueError(f"Threshold must be a non-negative integer, got {threshold!r}")
        if not isinstance(stroke_width, int) or stroke_width < 1:
            raise ValueError(f"Stroke width must be a positive integer, got {stroke_width!r}")
        if output_format is not None:
            output_format = check_format(output_format)

        self.offset = offset
        self.threshold = threshold
        self.stroke_width = stroke_width
        self.output_format = output_format
        self.quality = quality
        self.tracer = CurveTracer(offset, threshold)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ImageConverter":
        """Build a converter from a loaded configuration dictionary."""
        conversion = config.get("conversion", {})
        rendering = config.get("rendering", {})
        output = config.get("output", {})
        return cls(
            offset=conversion.get("offset", OFFSET_DEFAULT),
            threshold=conversion.get("threshold", THRESHOLD_DEFAULT),
            stroke_width=rendering.get("stroke_width", 1),
            output_format=output.get("format", "JPEG"),
            quality=output.get("quality", 75),
        )

    def trace(self, grid: np.ndarray) -> List[BandTrace]:
        """Trace every band of the grid without drawing anything."""
        return self.tracer.trace(grid)

    def to_curved(self, grid: np.ndarray) -> OutputSurface:
        """
        Draw the sketch of a pixel grid.

        Args:
            grid: uint8 array of shape (height, width, channels)

        Returns:
            Surface of the same size and channel layout holding the curves
        """
        height, width, channels = grid.shape
        surface = OutputSurface.blank(width, height, channels, self.stroke_width)

        curve_count = 0
        for band in self.trace(grid):
            surface.draw_curves(band.curves)
            curve_count += len(band.curves)

        self.logger.info(f"Drew {curve_count} curves on {width}x{height} image")
        if surface.is_blank():
            self.logger.warning(f"No strokes landed on the {width}x{height} canvas, output is blank")
        return surface

    def convert_bytes(self, data: bytes, image_format: Optional[str] = None) -> bytes:
        """
        Convert an encoded image and return the encoded sketch.

        Args:
            data: Encoded input image
            image_format: Output format, defaults to the configured one or JPEG

        Returns:
            Encoded output image
        """
        grid = decode_image(data)
        surface = self.to_curved(grid)
        return encode_image(surface.to_image(), image_format or self.output_format or "JPEG", self.quality)

    def convert(self, input_path: Union[str, Path], output_path: Union[str, Path]) -> Path:
        """
        Convert an image file and write the sketch to ``output_path``.

        The input is fully decoded before the output file is touched, so a
        bad input never leaves an output file behind.

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        image_format = resolve_format(output_path, self.output_format)

        self.logger.info(f"Processing image: {input_path}")
        grid = load_pixel_grid(input_path)
        surface = self.to_curved(grid)
        encoded = encode_image(surface.to_image(), image_format, self.quality)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(encoded)
        self.logger.info(f"Saved sketch to {output_path}")
        return output_path
