"""Bezier spline evaluation using De Casteljau's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._parameter import as_parameter, unit_interval

if TYPE_CHECKING:
    from ._bezier_spline import BezierSpline


def bezier_spline_evaluate(
    spline: BezierSpline,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a Bezier spline at parameter values by De Casteljau's algorithm.

    Parameters
    ----------
    spline : BezierSpline
        Bezier spline with homogeneous control points
    u : float or Tensor
        Parameter values, shape (*query_shape). Should be in [0, 1] for
        standard evaluation.

    Returns
    -------
    points : Tensor
        Homogeneous points, shape (*query_shape, 4). Divide by w (see
        ``homogeneous_to_cartesian``) for Cartesian coordinates.

    Raises
    ------
    ExtrapolationError
        If any parameter is outside [0, 1] and spline.extrapolate == 'error'

    Notes
    -----
    De Casteljau's algorithm for control points P_0, P_1, ..., P_n:

    1. Set q_j = P_j for j = 0, ..., n
    2. For r = 1, ..., n:
       q_j <- (1-u) * q_j + u * q_{j+1}  for j = 0, ..., n-r
    3. Result: C(u) = q_0

    No Bernstein coefficients are formed, which keeps repeated
    interpolation numerically stable for any degree.
    """
    control_points = spline.control_points

    u = as_parameter(u, like=control_points)
    u = unit_interval(u, spline.extrapolate)

    query_shape = u.shape
    u_flat = u.reshape(-1)
    n_points = u_flat.shape[0]
    n_control = control_points.shape[0]

    # Working copy, shape (n_points, n_control, 4)
    q = control_points.unsqueeze(0).expand(n_points, -1, -1).clone()
    u_exp = u_flat.view(-1, 1, 1)

    for r in range(1, n_control):
        q_left = q[:, : n_control - r]
        q_right = q[:, 1 : n_control - r + 1]
        q = (1 - u_exp) * q_left + u_exp * q_right

    return q[:, 0].reshape(*query_shape, control_points.shape[-1])
