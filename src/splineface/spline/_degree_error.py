from ._spline_error import SplineError


class DegreeError(SplineError):
    """Raised when a degree, order, or basis index is invalid."""

    pass
