from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised for a parameter outside [0, 1] under extrapolate='error'."""

    pass
