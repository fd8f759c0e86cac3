"""Homogeneous Bezier spline representation."""

from __future__ import annotations

from typing import Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._degree_error import DegreeError
from .._parameter import check_extrapolate


@tensorclass
class BezierSpline:
    """Bezier curve with homogeneous control points.

    A Bezier spline of order k has k control points and degree k - 1.
    Control points are (x, y, z, w); plain 3D points are stored with w = 1.

    Attributes
    ----------
    control_points : Tensor
        Homogeneous control points, shape (order, 4)
    extrapolate : str
        How to handle out-of-domain queries: "error", "clamp", "extrapolate"
    """

    control_points: Tensor
    extrapolate: str

    @property
    def order(self) -> int:
        """Return the number of control points."""
        return self.control_points.shape[0]

    @property
    def degree(self) -> int:
        """Return the degree of the Bezier spline."""
        return self.order - 1

    def evaluate_at(self, u: Union[float, Tensor]) -> Tensor:
        """Evaluate the spline at u with de Casteljau's algorithm."""
        from ._bezier_spline_evaluate import bezier_spline_evaluate

        return bezier_spline_evaluate(self, u)

    def derivative(self) -> BezierSpline:
        """Return the derivative spline, one order lower."""
        from ._bezier_spline_derivative import bezier_spline_derivative

        return bezier_spline_derivative(self)


def bezier_spline(
    control_points: Tensor,
    extrapolate: str = "error",
) -> BezierSpline:
    """Create a Bezier spline from homogeneous or plain 3D control points.

    Parameters
    ----------
    control_points : Tensor
        Either homogeneous points of shape (order, 4), used as given, or
        plain points of shape (order, 3), which get the weight w = 1.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"error"``: Raise ExtrapolationError for u outside [0, 1] (default).
        - ``"clamp"``: Clamp u to [0, 1].
        - ``"extrapolate"``: Allow extrapolation outside [0, 1].

    Returns
    -------
    BezierSpline
        Spline owning a copy of the control points.

    Raises
    ------
    ValueError
        If the points are not of shape (order, 3) or (order, 4).
    DegreeError
        If there are no control points.

    Examples
    --------
    >>> spline = bezier_spline(torch.tensor([[0., 0., 0.], [1., 2., 0.]]))
    >>> spline.control_points
    tensor([[0., 0., 0., 1.],
            [1., 2., 0., 1.]])
    >>> spline.degree
    1
    """
    control_points = torch.as_tensor(control_points)
    if not control_points.dtype.is_floating_point:
        control_points = control_points.to(torch.get_default_dtype())

    if control_points.dim() != 2 or control_points.shape[-1] not in (3, 4):
        raise ValueError(
            "bezier_spline: control_points must have shape (order, 3) or "
            f"(order, 4), got {tuple(control_points.shape)}"
        )
    if control_points.shape[0] < 1:
        raise DegreeError("A Bezier spline needs at least one control point")

    if control_points.shape[-1] == 3:
        w = torch.ones_like(control_points[:, :1])
        control_points = torch.cat([control_points, w], dim=-1)
    else:
        control_points = control_points.clone()

    return BezierSpline(
        control_points=control_points,
        extrapolate=check_extrapolate(extrapolate),
        batch_size=[],
    )
