"""Bezier curve in Bernstein polynomial form."""

from typing import Callable, Union

import torch
from torch import Tensor

from .._bernstein import bernstein
from .._degree_error import DegreeError
from .._parameter import as_parameter, check_extrapolate


def bezier(
    control_points: Tensor,
    extrapolate: str = "error",
) -> Callable[[Union[float, Tensor]], Tensor]:
    """Create a Bezier curve evaluator from control points.

    The curve is the Bernstein-weighted sum of its control points,

    .. math::

        C(u) = \\sum_{i=0}^{n} B_{i,n}(u) P_i

    where n = order - 1. The Bernstein basis functions (and their binomial
    coefficients) are built once, here, and shared by every evaluation.

    Parameters
    ----------
    control_points : Tensor
        Control points, shape (order, *value_shape).
        For a 3D curve, shape would be (order, 3).
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"error"``: Raise ExtrapolationError for u outside [0, 1] (default).
        - ``"clamp"``: Clamp u to [0, 1].
        - ``"extrapolate"``: Allow extrapolation outside [0, 1].

    Returns
    -------
    curve : Callable[[Tensor], Tensor]
        Function mapping parameter values of shape (*query_shape) to points
        of shape (*query_shape, *value_shape).

    Raises
    ------
    DegreeError
        If there are no control points.

    Examples
    --------
    >>> points = torch.tensor([[0., 0., 0.], [1., 1., 0.], [2., 0., 0.]])
    >>> curve = bezier(points)
    >>> curve(0.5)
    tensor([1.0000, 0.5000, 0.0000])
    """
    control_points = torch.as_tensor(control_points).clone()
    if control_points.dim() == 0 or control_points.shape[0] < 1:
        raise DegreeError("A Bezier curve needs at least one control point")

    check_extrapolate(extrapolate)

    order = control_points.shape[0]
    degree = order - 1
    bases = [
        bernstein(i, degree, extrapolate=extrapolate) for i in range(order)
    ]

    def curve(u: Union[float, Tensor]) -> Tensor:
        u = as_parameter(u, like=control_points)

        # Shape: (*query_shape, order)
        weights = torch.stack([b(u) for b in bases], dim=-1)

        return torch.tensordot(
            weights, control_points.to(weights.dtype), dims=1
        )

    return curve
