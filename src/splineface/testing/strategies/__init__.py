"""Hypothesis strategies for curve evaluation testing."""

from ._clamped_knot_vectors import clamped_knot_vectors
from ._control_points import control_points
from ._degrees import degrees
from ._real_numbers import real_numbers
from ._unit_interval import unit_interval

__all__ = [
    # Numeric strategies
    "real_numbers",
    "unit_interval",
    "degrees",
    # Tensor strategies
    "control_points",
    "clamped_knot_vectors",
]
