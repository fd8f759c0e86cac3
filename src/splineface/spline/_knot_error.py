from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for malformed knot vectors (wrong shape, empty)."""

    pass
