"""Testing utilities for splineface."""

from . import strategies

__all__ = [
    "strategies",
]
