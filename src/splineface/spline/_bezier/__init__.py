from ._bezier import bezier
from ._bezier_spline import (
    BezierSpline,
    bezier_spline,
)
from ._bezier_spline_derivative import (
    bezier_spline_derivative,
    bezier_spline_derivative_evaluate,
)
from ._bezier_spline_evaluate import bezier_spline_evaluate
from ._bezier_spline_split import bezier_spline_split
from ._homogeneous import homogeneous_to_cartesian

__all__ = [
    "BezierSpline",
    "bezier",
    "bezier_spline",
    "bezier_spline_derivative",
    "bezier_spline_derivative_evaluate",
    "bezier_spline_evaluate",
    "bezier_spline_split",
    "homogeneous_to_cartesian",
]
