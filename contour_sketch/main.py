#!/usr/bin/env python3
"""
Command line entry point for the Contour Sketch converter.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from contour_sketch.converter import ImageConverter
from contour_sketch.utils.config import default_config_path, load_config
from contour_sketch.utils.image import is_image_file
from contour_sketch.utils.logging import setup_logging

def setup_argparse() -> argparse.ArgumentParser:
    """Set up command line argument parsing."""
    parser = argparse.ArgumentParser(description="Contour Sketch - turn images into curve line art")
    parser.add_argument("--input", type=str, required=True, help="Path to input image or directory of images")
    parser.add_argument("--output", type=str, required=True, help="Path to output image or directory")
    parser.add_argument("--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--offset", type=int, default=None, help="Band spacing and curve bulge in pixels")
    parser.add_argument("--threshold", type=int, default=None, help="Accumulated ink needed per control point")
    parser.add_argument("--format", type=str, default=None, help="Output image format, e.g. JPEG or PNG")
    parser.add_argument("--log-file", type=str, default=None, help="Optional log file")
    parser.add_argument("--verbose", action="store_true", help="Log per-band details")
    return parser

def build_config(args: argparse.Namespace) -> Dict:
    """Load the configuration file and apply command line overrides."""
    config_path = args.config
    if config_path is None and default_config_path().exists():
        config_path = str(default_config_path())
    config = load_config(config_path)

    if args.offset is not None:
        config["conversion"]["offset"] = args.offset
    if args.threshold is not None:
        config["conversion"]["threshold"] = args.threshold
    if args.format is not None:
        config["output"]["format"] = args.format
    return config

def convert_directory(converter: ImageConverter, input_dir: Path, output_dir: Path) -> List[Path]:
    """
    Convert every image in a directory.

    Files that fail are logged and skipped.

    Returns:
        List of input files that could not be converted
    """
    image_format = converter.output_format or "JPEG"
    extension = ".jpg" if image_format.upper() == "JPEG" else f".{image_format.lower()}"
    output_dir.mkdir(parents=True, exist_ok=True)

    failed = []
    image_paths = sorted(p for p in input_dir.iterdir() if is_image_file(p))
    logging.info(f"Found {len(image_paths)} images in {input_dir}")

    for image_path in image_paths:
        output_path = output_dir / f"{image_path.stem}{extension}"
        try:
            converter.convert(image_path, output_path)
        except (OSError, ValueError) as e:
            logging.error(f"Failed to convert {image_path}: {str(e)}")
            failed.append(image_path)
    return failed

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point of the converter."""
    parser = setup_argparse()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_config(args)
        converter = ImageConverter.from_config(config)
    except (OSError, ValueError) as e:
        logging.error(f"Invalid configuration: {str(e)}")
        return 2

    input_path = Path(args.input)
    output_path = Path(args.output)

    if input_path.is_dir():
        failed = convert_directory(converter, input_path, output_path)
        if failed:
            logging.error(f"{len(failed)} images could not be converted")
            return 1
        logging.info(f"Conversion completed. Results saved to {output_path}")
        return 0

    try:
        converter.convert(input_path, output_path)
    except (OSError, ValueError) as e:
        logging.error(f"Conversion failed: {str(e)}")
        return 1

    logging.info(f"Conversion completed. Result saved to {output_path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
