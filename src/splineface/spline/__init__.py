"""Parametric curve evaluation for PyTorch tensors.

Bernstein polynomials, Bezier curves and B-spline basis functions with
autograd support.

Bernstein Polynomials
---------------------
bernstein
    Create (or evaluate) the Bernstein polynomial B_{i,n}.
bernstein_evaluate
    Evaluate a Bernstein polynomial at parameter values.
factorial
    Factorial of a non-negative integer.

Bezier Curves
-------------
bezier
    Create a Bezier curve evaluator in Bernstein form.
bezier_spline
    Create a homogeneous Bezier spline from 3D or 4D points.
bezier_spline_evaluate
    Evaluate a Bezier spline with De Casteljau's algorithm.
bezier_spline_derivative
    Compute the derivative spline.
bezier_spline_derivative_evaluate
    Evaluate higher derivatives of a Bezier spline.
bezier_spline_split
    Subdivide a Bezier spline at a parameter value.
homogeneous_to_cartesian
    Project homogeneous points to Cartesian coordinates.

B-Splines
---------
knot_span
    Locate the knot span containing a parameter value.
b_spline_basis_evaluate
    Evaluate a B-spline basis function (Cox-de Boor recursion).
b_spline_basis
    Evaluate or partially apply a B-spline basis function.

Data Types
----------
BernsteinBasis
    Bernstein polynomial with its binomial coefficient.
BezierSpline
    Bezier curve with homogeneous control points.

Exceptions
----------
SplineError
    Base exception for spline operations.
ExtrapolationError
    Query point outside the curve domain.
KnotError
    Invalid knot vector.
DegreeError
    Invalid degree, order or index.
"""

from ._b_spline import (
    b_spline_basis,
    b_spline_basis_evaluate,
    knot_span,
)
from ._bernstein import (
    BernsteinBasis,
    bernstein,
    bernstein_evaluate,
    factorial,
)
from ._bezier import (
    BezierSpline,
    bezier,
    bezier_spline,
    bezier_spline_derivative,
    bezier_spline_derivative_evaluate,
    bezier_spline_evaluate,
    bezier_spline_split,
    homogeneous_to_cartesian,
)
from ._degree_error import DegreeError
from ._extrapolation_error import ExtrapolationError
from ._knot_error import KnotError
from ._spline_error import SplineError

__all__ = [
    "BernsteinBasis",
    "BezierSpline",
    "DegreeError",
    "ExtrapolationError",
    "KnotError",
    "SplineError",
    "b_spline_basis",
    "b_spline_basis_evaluate",
    "bernstein",
    "bernstein_evaluate",
    "bezier",
    "bezier_spline",
    "bezier_spline_derivative",
    "bezier_spline_derivative_evaluate",
    "bezier_spline_evaluate",
    "bezier_spline_split",
    "factorial",
    "homogeneous_to_cartesian",
    "knot_span",
]
