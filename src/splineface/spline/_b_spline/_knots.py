import torch
from torch import Tensor

from .._knot_error import KnotError


def as_knots(knots: Tensor) -> Tensor:
    """Convert a knot vector to a 1-D floating point tensor.

    Ordering is not checked: callers supply a non-decreasing vector.
    """
    knots = torch.as_tensor(knots)
    if not knots.dtype.is_floating_point:
        knots = knots.to(torch.get_default_dtype())

    if knots.dim() != 1:
        raise KnotError(
            f"Knot vector must be 1-D, got shape {tuple(knots.shape)}"
        )
    if knots.shape[0] == 0:
        raise KnotError("Knot vector must not be empty")

    return knots
