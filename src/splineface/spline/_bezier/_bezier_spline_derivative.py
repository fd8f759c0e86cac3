"""Bezier spline derivative computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._degree_error import DegreeError

if TYPE_CHECKING:
    from ._bezier_spline import BezierSpline


def bezier_spline_derivative(spline: BezierSpline) -> BezierSpline:
    """
    Compute the derivative of a Bezier spline.

    The derivative of a degree-n Bezier spline is a degree-(n-1) Bezier
    spline with control points

        Q_i = n * (P_{i+1} - P_i)  for i = 0, ..., n-1

    All four homogeneous coordinates are differenced, the weight included.

    Parameters
    ----------
    spline : BezierSpline
        Input Bezier spline of degree n >= 1

    Returns
    -------
    derivative : BezierSpline
        New spline of order ``spline.order - 1``. The input is not
        modified and the result shares no storage with it.

    Raises
    ------
    DegreeError
        If the spline has degree 0 (a single control point).

    Examples
    --------
    >>> spline = bezier_spline(torch.tensor([[0., 0., 0.], [1., 2., 0.]]))
    >>> bezier_spline_derivative(spline).control_points
    tensor([[1., 2., 0., 0.]])
    """
    from ._bezier_spline import BezierSpline

    control_points = spline.control_points
    n = spline.degree

    if n < 1:
        raise DegreeError(
            "Cannot compute derivative of degree-0 Bezier spline"
        )

    return BezierSpline(
        control_points=n * (control_points[1:] - control_points[:-1]),
        extrapolate=spline.extrapolate,
        batch_size=[],
    )


def bezier_spline_derivative_evaluate(
    spline: BezierSpline,
    u: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a Bezier spline at parameter values.

    Parameters
    ----------
    spline : BezierSpline
        Input Bezier spline
    u : float or Tensor
        Parameter values
    order : int
        Derivative order (default 1)

    Returns
    -------
    derivative_values : Tensor
        Homogeneous derivative values, shape (*query_shape, 4)

    Raises
    ------
    ValueError
        If order < 1.
    DegreeError
        If order > degree of the spline.
    """
    from ._bezier_spline_evaluate import bezier_spline_evaluate

    if order < 1:
        raise ValueError(f"Derivative order must be at least 1, got {order}")

    degree = spline.degree

    if order > degree:
        raise DegreeError(
            f"Cannot compute order-{order} derivative "
            f"of degree-{degree} spline"
        )

    current = spline
    for _ in range(order):
        current = bezier_spline_derivative(current)

    return bezier_spline_evaluate(current, u)
