"""Bezier spline subdivision (splitting) using De Casteljau's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._parameter import as_parameter, unit_interval

if TYPE_CHECKING:
    from ._bezier_spline import BezierSpline


def bezier_spline_split(
    spline: BezierSpline,
    u: Union[float, Tensor] = 0.5,
) -> tuple[BezierSpline, BezierSpline]:
    """
    Split a Bezier spline at parameter u into two splines.

    The first spline covers [0, u] and the second covers [u, 1], both
    reparameterised onto [0, 1] and of the same order as the input.

    Parameters
    ----------
    spline : BezierSpline
        Input Bezier spline
    u : float or Tensor
        Scalar split parameter in [0, 1]. Default is 0.5 (midpoint split).

    Returns
    -------
    left : BezierSpline
        Sub-spline over [0, u]
    right : BezierSpline
        Sub-spline over [u, 1]

    Raises
    ------
    ValueError
        If u is not a scalar.
    ExtrapolationError
        If u is outside [0, 1] and spline.extrapolate == 'error'

    Notes
    -----
    The De Casteljau pyramid q^(r)_j yields both control polygons:

    - left: q^(0)_0, q^(1)_0, ..., q^(n)_0
    - right: q^(n)_0, q^(n-1)_1, ..., q^(0)_n
    """
    from ._bezier_spline import BezierSpline

    control_points = spline.control_points

    u = as_parameter(u, like=control_points)
    if u.dim() != 0:
        raise ValueError(
            f"bezier_spline_split: u must be a scalar, "
            f"got shape {tuple(u.shape)}"
        )
    u = unit_interval(u, spline.extrapolate)

    # pyramid[r][j] = q^(r)_j
    pyramid = [control_points.clone()]
    for _ in range(1, spline.order):
        level = pyramid[-1]
        pyramid.append((1 - u) * level[:-1] + u * level[1:])

    left_control = torch.stack([level[0] for level in pyramid], dim=0)
    right_control = torch.stack(
        [level[-1] for level in reversed(pyramid)], dim=0
    )

    left = BezierSpline(
        control_points=left_control,
        extrapolate=spline.extrapolate,
        batch_size=[],
    )

    right = BezierSpline(
        control_points=right_control,
        extrapolate=spline.extrapolate,
        batch_size=[],
    )

    return left, right
