from typing import Union

import torch
from torch import Tensor

from .._parameter import as_parameter
from ._knots import as_knots


def knot_span(
    knots: Tensor,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Locate the knot span containing each parameter value.

    Parameters
    ----------
    knots : Tensor
        Knot vector, shape (n_knots,). Must be non-decreasing; repeated
        knots are allowed. Ordering is not checked.
    u : float or Tensor
        Parameter values, shape (*query_shape)

    Returns
    -------
    span : Tensor
        int64 indices i with knots[i] <= u < knots[i+1], shape (*query_shape)

    Raises
    ------
    KnotError
        If the knot vector is not 1-D or is empty.

    Notes
    -----
    Binary search for the rightmost knot not exceeding u. The bracket
    starts at lower = -1, upper = n_knots and keeps the invariant
    knots[lower] <= u < knots[upper] (with knots[-1] = -inf and
    knots[n_knots] = +inf) until upper - lower == 1.

    Among repeated knots the largest index wins. u is not clamped: values
    below knots[0] give -1, values at or above knots[-1] give n_knots - 1.

    Examples
    --------
    >>> knots = torch.tensor([0., 0., 0., 1., 2., 3., 4., 4., 5., 5., 5.])
    >>> knot_span(knots, torch.tensor([0.0, 0.5, 1.0, 2.0, 5.0]))
    tensor([ 2,  2,  3,  4, 10])
    """
    knots = as_knots(knots)
    u = as_parameter(u, like=knots)

    n_knots = knots.shape[0]

    lower = torch.full(
        u.shape, -1, dtype=torch.int64, device=knots.device
    )
    upper = torch.full(
        u.shape, n_knots, dtype=torch.int64, device=knots.device
    )

    searching = (upper - lower) > 1
    while torch.any(searching):
        mid = torch.div(upper + lower, 2, rounding_mode="floor")

        # mid is a valid index wherever the search is still open
        above = knots[mid.clamp(0, n_knots - 1)] > u

        upper = torch.where(searching & above, mid, upper)
        lower = torch.where(searching & ~above, mid, lower)

        searching = (upper - lower) > 1

    return lower
