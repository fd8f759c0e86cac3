"""Bernstein polynomial evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._parameter import as_parameter, unit_interval

if TYPE_CHECKING:
    from ._bernstein import BernsteinBasis


def bernstein_evaluate(
    basis: BernsteinBasis,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a Bernstein polynomial at parameter values.

    Parameters
    ----------
    basis : BernsteinBasis
        Bernstein polynomial with precomputed binomial coefficient
    u : float or Tensor
        Parameter values, shape (*query_shape), in [0, 1]

    Returns
    -------
    values : Tensor
        ``C(n, i) * u**i * (1 - u)**(n - i)``, shape (*query_shape)

    Raises
    ------
    ExtrapolationError
        If any parameter is outside [0, 1] and basis.extrapolate == 'error'

    Notes
    -----
    ``0**0`` evaluates to 1, so the first basis function is 1 at u=0 and
    the last one is 1 at u=1.
    """
    u = unit_interval(as_parameter(u), basis.extrapolate)

    coefficient = basis.coefficient.to(dtype=u.dtype, device=u.device)

    return (
        coefficient
        * torch.pow(u, basis.i)
        * torch.pow(1 - u, basis.n - basis.i)
    )
