class SplineError(ValueError):
    """Base exception for spline and curve evaluation errors."""

    pass
