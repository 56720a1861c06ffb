"""
Image utility functions: decoding to pixel grids and encoding results.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError
from PIL.Image import DecompressionBombError

# Modes the converter works on directly; everything else is normalised first
NATIVE_MODES = ("L", "LA", "RGB", "RGBA")

# Formats Pillow cannot write with an alpha channel
OPAQUE_FORMATS = ("JPEG", "PPM", "EPS")

# Formats that honour the ``quality`` save option
LOSSY_FORMATS = ("JPEG", "WEBP")

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp")

def _normalise(image: Image.Image) -> np.ndarray:
    """Convert a decoded image to a height x width x channels uint8 array."""
    if image.mode.startswith("I"):
        # 16/32-bit greyscale, scale down to 8 bits
        wide = np.asarray(image).astype(np.uint32) // 257
        grid = np.clip(wide, 0, 255).astype(np.uint8)
    else:
        if image.mode not in NATIVE_MODES:
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            target = "RGBA" if has_alpha else ("L" if image.mode == "1" else "RGB")
            logging.debug(f"Converting image mode {image.mode} to {target}")
            image = image.convert(target)
        grid = np.asarray(image, dtype=np.uint8)

    if grid.ndim == 2:
        grid = grid[:, :, np.newaxis]

    grid = np.ascontiguousarray(grid)
    grid.flags.writeable = False
    return grid

def decode_image(data: bytes) -> np.ndarray:
    """
    Decode encoded image bytes into a read-only pixel grid.

    Args:
        data: Encoded image (PNG, JPEG, ...)

    Returns:
        uint8 array of shape (height, width, channels)

    Raises:
        ValueError: If the bytes are not a decodable image
    """
    try:
        with Image.open(BytesIO(data)) as image:
            image.load()
            return _normalise(image)
    except (UnidentifiedImageError, DecompressionBombError, OSError, SyntaxError) as e:
        raise ValueError(f"Could not decode image: {e}") from e

def load_pixel_grid(image_path: Union[str, Path]) -> np.ndarray:
    """
    Read an image file into a pixel grid.

    File system errors propagate as ``OSError``; undecodable content raises
    ``ValueError``.
    """
    data = Path(image_path).read_bytes()
    try:
        return decode_image(data)
    except ValueError:
        logging.error(f"Could not read image: {image_path}")
        raise

def check_format(image_format: str) -> str:
    """
    Normalise a Pillow format name and make sure Pillow can write it.

    Raises:
        ValueError: If no Pillow encoder is registered under that name
    """
    image_format = str(image_format).upper()
    Image.init()
    if image_format not in Image.SAVE:
        raise ValueError(f"Unsupported output format: {image_format}")
    return image_format

def resolve_format(output_path: Union[str, Path], image_format: Optional[str]) -> str:
    """Return the explicit format, or infer it from the file extension."""
    if image_format:
        return check_format(image_format)

    extension = Path(output_path).suffix.lower()
    registered = Image.registered_extensions()
    if extension not in registered:
        raise ValueError(f"Cannot infer image format from extension: {output_path}")
    return check_format(registered[extension])

def encode_image(image: Image.Image, image_format: str = "JPEG", quality: int = 75) -> bytes:
    """
    Encode an image to bytes in the requested format.

    Alpha is dropped for formats that cannot store it.
    """
    image_format = check_format(image_format)
    if image_format in OPAQUE_FORMATS and image.mode in ("LA", "RGBA"):
        image = image.convert(image.mode[:-1])

    options = {}
    if image_format in LOSSY_FORMATS:
        options["quality"] = quality

    buffer = BytesIO()
    image.save(buffer, format=image_format, **options)
    return buffer.getvalue()

def is_image_file(path: Path) -> bool:
    """Check whether a path looks like an input image by its extension."""
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
