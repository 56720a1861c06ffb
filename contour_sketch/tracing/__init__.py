"""
Tracing module for turning band intensity into cubic curves.
"""

from .curve import Curve
from .tracer import BandTrace, ControlPointWindow, CurveTracer

__all__ = ['BandTrace', 'ControlPointWindow', 'Curve', 'CurveTracer']
