#!/usr/bin/env python3
"""
Main script for the Contour Sketch converter.
"""

import sys

from contour_sketch.main import main

if __name__ == "__main__":
    sys.exit(main())
