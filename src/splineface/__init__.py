"""splineface: Bezier and B-spline curve evaluation for PyTorch."""

from . import spline

__all__ = [
    "spline",
]

__version__ = "0.1.0"
